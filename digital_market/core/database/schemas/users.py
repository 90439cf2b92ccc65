"""
Schema models for user insert and read payloads.

The insert schema is derived from the entity's insertable fields; the read
schema is declared separately so the stored password never leaves the
database layer.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..entities.users import UserBase


class UserCreate(UserBase):
    """Insert schema for users (omits ``id`` and ``joined_at``)."""

    model_config = ConfigDict(extra="forbid")


class UserRead(BaseModel):
    """Schema for reading a user."""

    id: int
    username: str
    display_name: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    joined_at: Optional[datetime] = None
    is_creator: Optional[bool] = None

    model_config = ConfigDict(from_attributes=True)
