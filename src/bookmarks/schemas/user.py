"""Pydantic schemas for the user profile.

UserRead lists its fields explicitly, so the password hash on the
ORM object is never serialized.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserRead(BaseModel):
    id: uuid.UUID
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserUpdate(BaseModel):
    """Partial profile edit. Only fields present in the body are applied."""
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def reject_null_email(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("email may be omitted but not null")
        return v
