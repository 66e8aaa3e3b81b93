"""Pydantic schemas for signup/signin."""

from pydantic import BaseModel, EmailStr, Field


class AuthRequest(BaseModel):
    """Body for both /auth/signup and /auth/signin."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
