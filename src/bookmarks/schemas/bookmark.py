"""Pydantic schemas for bookmarks.

Separate "Create"/"Update" schemas (input) from the "Read" schema (output).
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class BookmarkCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    link: str = Field(..., min_length=1)
    description: Optional[str] = None


class BookmarkUpdate(BaseModel):
    """Partial edit. Fields left out of the body keep their stored value."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    link: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None

    @field_validator("title", "link")
    @classmethod
    def reject_explicit_null(cls, v: Optional[str]) -> str:
        # Omitting the field is fine; sending null would blank a required column.
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class BookmarkRead(BaseModel):
    id: int
    user_id: uuid.UUID
    title: str
    description: Optional[str] = None
    link: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
