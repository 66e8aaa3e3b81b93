"""Bookmark service — CRUD scoped to the owning user.

Reads filter on owner in the query itself, so a foreign bookmark is
indistinguishable from a missing one. Edits and deletes load by id
alone and refuse with AccessDenied when the row is absent or owned
by someone else.
"""

import uuid
from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.db.models import Bookmark
from bookmarks.services.exceptions import AccessDenied

logger = structlog.get_logger()

# bookmarks.id is a 32-bit INTEGER column; larger ids cannot exist.
MAX_BOOKMARK_ID = 2_147_483_647


def _storable_id(bookmark_id: int) -> bool:
    return 1 <= bookmark_id <= MAX_BOOKMARK_ID


class BookmarkService:
    """Business logic for a user's bookmarks."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        user_id: uuid.UUID,
        title: str,
        link: str,
        description: Optional[str] = None,
    ) -> Bookmark:
        bookmark = Bookmark(
            user_id=user_id,
            title=title,
            link=link,
            description=description,
        )
        self.db.add(bookmark)
        await self.db.commit()
        await self.db.refresh(bookmark)

        logger.info("bookmark.created", user_id=str(user_id), bookmark_id=bookmark.id)
        return bookmark

    async def list_by_owner(self, user_id: uuid.UUID) -> list[Bookmark]:
        result = await self.db.execute(
            select(Bookmark)
            .where(Bookmark.user_id == user_id)
            .order_by(Bookmark.id)
        )
        return list(result.scalars().all())

    async def get_by_id(
        self, user_id: uuid.UUID, bookmark_id: int
    ) -> Bookmark | None:
        """Return the bookmark only if it exists and belongs to user_id."""
        if not _storable_id(bookmark_id):
            return None
        result = await self.db.execute(
            select(Bookmark).where(
                Bookmark.id == bookmark_id,
                Bookmark.user_id == user_id,
            )
        )
        return result.scalars().first()

    async def edit_by_id(
        self, user_id: uuid.UUID, bookmark_id: int, changes: dict
    ) -> Bookmark:
        """Apply a partial update. Fields not in `changes` are left alone."""
        bookmark = await self._get_owned_or_deny(user_id, bookmark_id)
        for field, value in changes.items():
            setattr(bookmark, field, value)

        await self.db.commit()
        await self.db.refresh(bookmark)
        return bookmark

    async def delete_by_id(self, user_id: uuid.UUID, bookmark_id: int) -> None:
        bookmark = await self._get_owned_or_deny(user_id, bookmark_id)
        await self.db.delete(bookmark)
        await self.db.commit()

        logger.info("bookmark.deleted", user_id=str(user_id), bookmark_id=bookmark_id)

    async def _get_owned_or_deny(
        self, user_id: uuid.UUID, bookmark_id: int
    ) -> Bookmark:
        bookmark = None
        if _storable_id(bookmark_id):
            bookmark = await self.db.get(Bookmark, bookmark_id)
        if not bookmark or bookmark.user_id != user_id:
            logger.info(
                "bookmark.access_denied",
                user_id=str(user_id),
                bookmark_id=bookmark_id,
            )
            raise AccessDenied()
        return bookmark
