"""
Schema models for rating insert and read payloads.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..entities.ratings import RatingBase


class RatingCreate(RatingBase):
    """Insert schema for ratings (omits ``id``, ``created_at`` and ``updated_at``)."""

    # TODO: constrain ``rating`` to 1-5; out-of-range values are currently accepted.
    model_config = ConfigDict(extra="forbid")


class RatingRead(BaseModel):
    """Schema for reading a rating."""

    id: int
    user_id: int
    asset_id: int
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
