"""Auth service — signup, signin and access token issue.

The service layer owns the credential rules; routes only translate
HTTP in and out. Both operations answer with a token, never with
the user row or its hash.
"""

import asyncio

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.auth.jwt import create_access_token
from bookmarks.auth.password import dummy_verify, hash_password, verify_password
from bookmarks.db.models import User
from bookmarks.services.exceptions import DuplicateCredential, InvalidCredentials

logger = structlog.get_logger()


def issue_token(user_id: str, email: str) -> str:
    """Sign a short-lived access token for the given user."""
    return create_access_token(user_id=user_id, email=email)


class AuthService:
    """Credential checks and token issue."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def signup(self, email: str, password: str) -> str:
        """Create an account and return an access token.

        Email uniqueness is enforced by the database constraint rather
        than a pre-check, so two concurrent signups cannot both win.
        """
        # bcrypt is CPU-bound; keep it off the event loop.
        password_hash = await asyncio.to_thread(hash_password, password)
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("auth.signup_duplicate")
            raise DuplicateCredential()

        logger.info("auth.signup", user_id=str(user.id))
        return issue_token(str(user.id), user.email)

    async def signin(self, email: str, password: str) -> str:
        """Check credentials and return an access token.

        Unknown email and wrong password raise the identical error.
        """
        result = await self.db.execute(select(User).where(User.email == email))
        user = result.scalars().first()

        if not user:
            await asyncio.to_thread(dummy_verify, password)
            logger.info("auth.signin_failed")
            raise InvalidCredentials()

        matches = await asyncio.to_thread(
            verify_password, password, user.password_hash
        )
        if not matches:
            logger.info("auth.signin_failed")
            raise InvalidCredentials()

        logger.info("auth.signin", user_id=str(user.id))
        return issue_token(str(user.id), user.email)
