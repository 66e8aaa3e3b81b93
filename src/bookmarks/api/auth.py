"""Auth API — signup and signin.

- POST /auth/signup → create an account, returns an access token
- POST /auth/signin → email/password → access token

Both are open routes; every other router sits behind the bearer gate.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.db.engine import get_db
from bookmarks.schemas.auth import AuthRequest, TokenResponse
from bookmarks.services.auth_service import AuthService

router = APIRouter(prefix="/auth")


def _svc(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)


@router.post("/signup", response_model=TokenResponse, status_code=201)
async def signup(body: AuthRequest, svc: AuthService = Depends(_svc)):
    """Create a new user account."""
    token = await svc.signup(email=body.email, password=body.password)
    return TokenResponse(access_token=token)


@router.post("/signin", response_model=TokenResponse)
async def signin(body: AuthRequest, svc: AuthService = Depends(_svc)):
    """Sign in with email and password."""
    token = await svc.signin(email=body.email, password=body.password)
    return TokenResponse(access_token=token)
