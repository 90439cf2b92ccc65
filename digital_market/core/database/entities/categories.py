"""
Category entity models.

This module contains the database entity for asset categories. Each asset
belongs to exactly one category.
"""

from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field

from ..base import Base


class CategoryBase(Base):
    """Insertable fields for a category."""

    name: str = Field(unique=True, index=True, description="Unique category name")
    description: Optional[str] = Field(default=None, description="Category description")
    icon_name: str = Field(description="Icon class name used by the front end")
    asset_count: Optional[int] = Field(
        default=0,
        sa_column_kwargs={"server_default": sa.text("0")},
        description="Number of assets listed in the category",
    )


class Category(CategoryBase, table=True):
    """Persistent asset category.

    Table: categories
    """

    __tablename__ = "categories"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Category(id={self.id}, name={self.name})"
