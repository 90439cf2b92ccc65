"""
Asset entity models.

This module contains the database entity for purchasable digital assets.
An asset belongs to one category and one creator, carries ordered tag and
thumbnail lists, and optionally points at its stored file.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
from sqlmodel import Field

from ..base import Base, _utc_now_naive

# text[] on PostgreSQL, JSON everywhere else (SQLite has no array type)
StringList = sa.JSON().with_variant(postgresql.ARRAY(sa.Text()), "postgresql")


class AssetBase(Base):
    """Insertable fields for an asset."""

    title: str = Field(description="Asset title")
    description: Optional[str] = Field(default=None, description="Asset description")
    preview_url: str = Field(description="Public preview image URL")
    price: float = Field(sa_type=sa.REAL(), description="Listing price")
    category_id: int = Field(foreign_key="categories.id", index=True)
    creator_id: int = Field(foreign_key="users.id", index=True)
    tags: Optional[List[str]] = Field(default=None, sa_type=StringList, description="Ordered tag list")
    featured: Optional[bool] = Field(
        default=False,
        sa_column_kwargs={"server_default": sa.false()},
        description="Whether the asset is featured",
    )
    thumbnails: Optional[List[str]] = Field(default=None, sa_type=StringList, description="Ordered thumbnail URLs")

    # Stored file
    file_url: Optional[str] = Field(default=None, description="Storage key of the main asset file")
    file_type: Optional[str] = Field(default=None, description="File type/extension (e.g. pdf, zip, mp3)")
    file_size: Optional[int] = Field(default=None, description="File size in bytes")
    s3_object_key: Optional[str] = Field(default=None, description="Original object key")


class Asset(AssetBase, table=True):
    """Persistent digital asset listing.

    Table: assets
    """

    __tablename__ = "assets"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Timestamps
    created_at: Optional[datetime] = Field(
        default_factory=_utc_now_naive,
        sa_type=sa.DateTime(),
        sa_column_kwargs={"server_default": sa.func.now()},
    )

    # Server-maintained counters
    download_count: Optional[int] = Field(default=0, sa_column_kwargs={"server_default": sa.text("0")})
    rating: Optional[float] = Field(default=0.0, sa_type=sa.REAL(), sa_column_kwargs={"server_default": sa.text("0")})

    def __repr__(self) -> str:
        return f"Asset(id={self.id}, title={self.title}, price={self.price})"
