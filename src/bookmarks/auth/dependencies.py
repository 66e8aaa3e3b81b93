"""FastAPI auth dependencies.

Used as Depends() in route handlers to extract and validate the
current user identity from the Authorization header. The resulting
CurrentIdentity is handed to services as an explicit argument;
nothing is stashed on globals or the request state.
"""

import uuid
from typing import Optional

import structlog
from fastapi import Header

from bookmarks.auth.jwt import TokenError, verify_token
from bookmarks.services.exceptions import Unauthenticated

logger = structlog.get_logger()


class CurrentIdentity:
    """The authenticated user making the request, as proven by the token."""

    def __init__(self, user_id: uuid.UUID, email: str):
        self.user_id = user_id
        self.email = email

    def __repr__(self) -> str:
        return f"CurrentIdentity(user_id={self.user_id!s}, email={self.email!r})"


async def get_current_user(
    authorization: Optional[str] = Header(None),
) -> CurrentIdentity:
    """Extract current identity (required, 401 if no auth)."""
    if not authorization:
        raise Unauthenticated()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise Unauthenticated("Authorization header must be 'Bearer <token>'")

    return _authenticate_jwt(token.strip())


def _authenticate_jwt(token: str) -> CurrentIdentity:
    """Authenticate via JWT token."""
    try:
        payload = verify_token(token)
        user_id = uuid.UUID(payload["sub"])
    except TokenError as e:
        logger.info("auth.token_rejected", reason=str(e))
        raise Unauthenticated(str(e))
    except (ValueError, TypeError):
        logger.info("auth.token_rejected", reason="malformed subject")
        raise Unauthenticated("Invalid token: malformed subject")

    return CurrentIdentity(user_id=user_id, email=payload["email"])
