"""
Rating entity models.

This module contains the database entity for a user's star rating of an
asset. Ratings are expected on a 1-5 scale; the range is not enforced by
the table or by the insert schema.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field

from ..base import Base, _utc_now_naive


class RatingBase(Base):
    """Insertable fields for a rating."""

    user_id: int = Field(foreign_key="users.id", index=True)
    asset_id: int = Field(foreign_key="assets.id", index=True)
    rating: int = Field(description="Star rating, 1-5")
    comment: Optional[str] = Field(default=None, description="Optional review text")


class Rating(RatingBase, table=True):
    """Persistent asset rating.

    Table: ratings
    """

    __tablename__ = "ratings"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Timestamps
    created_at: Optional[datetime] = Field(
        default_factory=_utc_now_naive,
        sa_type=sa.DateTime(),
        sa_column_kwargs={"server_default": sa.func.now()},
    )
    updated_at: Optional[datetime] = Field(default=None, sa_type=sa.DateTime())

    def __repr__(self) -> str:
        return f"Rating(id={self.id}, asset_id={self.asset_id}, rating={self.rating})"
