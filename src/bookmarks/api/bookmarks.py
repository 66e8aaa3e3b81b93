"""Bookmark API routes.

Each route receives the verified identity via Depends() and hands
its user_id to the service, which scopes every query to that owner.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.auth.dependencies import CurrentIdentity, get_current_user
from bookmarks.db.engine import get_db
from bookmarks.schemas.bookmark import BookmarkCreate, BookmarkRead, BookmarkUpdate
from bookmarks.services.bookmark_service import BookmarkService

router = APIRouter(prefix="/bookmarks")


def _svc(db: AsyncSession = Depends(get_db)) -> BookmarkService:
    return BookmarkService(db)


@router.post("", response_model=BookmarkRead, status_code=201)
async def create_bookmark(
    body: BookmarkCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: BookmarkService = Depends(_svc),
):
    return await svc.create(
        user_id=identity.user_id,
        title=body.title,
        link=body.link,
        description=body.description,
    )


@router.get("", response_model=list[BookmarkRead])
async def list_bookmarks(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: BookmarkService = Depends(_svc),
):
    return await svc.list_by_owner(identity.user_id)


@router.get("/{bookmark_id}", response_model=Optional[BookmarkRead])
async def get_bookmark(
    bookmark_id: int,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: BookmarkService = Depends(_svc),
):
    """Fetch one bookmark. Missing or foreign ids answer 200 with null."""
    return await svc.get_by_id(identity.user_id, bookmark_id)


@router.patch("/{bookmark_id}", response_model=BookmarkRead)
async def edit_bookmark(
    bookmark_id: int,
    body: BookmarkUpdate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: BookmarkService = Depends(_svc),
):
    return await svc.edit_by_id(
        identity.user_id, bookmark_id, body.model_dump(exclude_unset=True)
    )


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: BookmarkService = Depends(_svc),
):
    await svc.delete_by_id(identity.user_id, bookmark_id)
    return Response(status_code=204)
