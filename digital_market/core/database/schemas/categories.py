"""
Schema models for category insert and read payloads.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..entities.categories import CategoryBase


class CategoryCreate(CategoryBase):
    """Insert schema for categories (omits ``id``)."""

    model_config = ConfigDict(extra="forbid")


class CategoryRead(BaseModel):
    """Schema for reading a category."""

    id: int
    name: str
    description: Optional[str] = None
    icon_name: str
    asset_count: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
