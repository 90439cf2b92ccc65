"""
User entity models.

This module contains the database entity for marketplace users. A user can
browse and buy assets; users flagged as creators can also list assets.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field

from ..base import Base, _utc_now_naive


class UserBase(Base):
    """Insertable fields for a user."""

    username: str = Field(unique=True, index=True, description="Unique login name")
    password: str = Field(description="Stored password value")
    display_name: str = Field(description="Name shown next to listed assets")
    bio: Optional[str] = Field(default=None, description="Free-text profile bio")
    avatar_url: Optional[str] = Field(default=None, description="Profile picture URL")
    is_creator: Optional[bool] = Field(
        default=False,
        sa_column_kwargs={"server_default": sa.false()},
        description="Whether the user may list assets",
    )


class User(UserBase, table=True):
    """Persistent marketplace user.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Timestamps
    joined_at: Optional[datetime] = Field(
        default_factory=_utc_now_naive,
        sa_type=sa.DateTime(),
        sa_column_kwargs={"server_default": sa.func.now()},
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, is_creator={self.is_creator})"
