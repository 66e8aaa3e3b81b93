"""User service — the authenticated user's own profile."""

import uuid

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.db.models import User
from bookmarks.services.exceptions import DuplicateCredential, Unauthenticated

logger = structlog.get_logger()


class UserService:
    """Profile reads and partial edits, always for the caller themselves."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_me(self, user_id: uuid.UUID) -> User:
        user = await self.db.get(User, user_id)
        if not user:
            # Valid signature, but the subject is gone.
            raise Unauthenticated("User no longer exists")
        return user

    async def edit_user(self, user_id: uuid.UUID, changes: dict) -> User:
        """Apply only the provided fields. A taken email raises DuplicateCredential."""
        user = await self.get_me(user_id)
        for field, value in changes.items():
            setattr(user, field, value)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("user.update_duplicate_email", user_id=str(user_id))
            raise DuplicateCredential()

        await self.db.refresh(user)
        logger.info("user.updated", user_id=str(user_id), fields=sorted(changes))
        return user
