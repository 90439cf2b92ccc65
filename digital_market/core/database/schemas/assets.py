"""
Schema models for asset insert and read payloads.

Besides the plain insert and read schemas this module declares the
``AssetWithDetails`` projection: an asset together with short summaries of
its creator and category, as shown in listings.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..entities.assets import Asset, AssetBase
from ..entities.categories import Category
from ..entities.users import User


class AssetCreate(AssetBase):
    """Insert schema for assets.

    Omits ``id``, ``created_at`` and the server-maintained ``download_count``
    and ``rating``.
    """

    model_config = ConfigDict(extra="forbid")


class AssetRead(BaseModel):
    """Schema for reading an asset."""

    id: int
    title: str
    description: Optional[str] = None
    preview_url: str
    price: float
    category_id: int
    creator_id: int
    created_at: Optional[datetime] = None
    tags: Optional[List[str]] = None
    featured: Optional[bool] = None
    thumbnails: Optional[List[str]] = None
    download_count: Optional[int] = None
    rating: Optional[float] = None
    file_url: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    s3_object_key: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CreatorSummary(BaseModel):
    """Public fields of the user who listed an asset."""

    id: int
    display_name: str
    username: str
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CategorySummary(BaseModel):
    """Fields of an asset's category shown alongside the asset."""

    id: int
    name: str
    icon_name: str

    model_config = ConfigDict(from_attributes=True)


class AssetWithDetails(AssetRead):
    """Asset with embedded creator and category summaries (read-only)."""

    creator: CreatorSummary = Field(description="Summary of the listing user")
    category: CategorySummary = Field(description="Summary of the asset's category")

    @classmethod
    def from_entities(cls, asset: Asset, creator: User, category: Category) -> AssetWithDetails:
        """Build the projection from loaded entities.

        Args:
            asset: Asset entity
            creator: User referenced by ``asset.creator_id``
            category: Category referenced by ``asset.category_id``

        Returns:
            AssetWithDetails instance
        """
        return cls(
            **AssetRead.model_validate(asset).model_dump(),
            creator=CreatorSummary.model_validate(creator),
            category=CategorySummary.model_validate(category),
        )
