"""User profile routes. Always the caller's own record."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.auth.dependencies import CurrentIdentity, get_current_user
from bookmarks.db.engine import get_db
from bookmarks.schemas.user import UserRead, UserUpdate
from bookmarks.services.user_service import UserService

router = APIRouter(prefix="/users")


def _svc(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get("/me", response_model=UserRead)
async def get_me(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: UserService = Depends(_svc),
):
    """Get the current authenticated user's profile."""
    return await svc.get_me(identity.user_id)


@router.patch("", response_model=UserRead)
async def edit_user(
    body: UserUpdate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: UserService = Depends(_svc),
):
    """Partially update the current user's profile."""
    return await svc.edit_user(identity.user_id, body.model_dump(exclude_unset=True))
