"""
Asset repository.

Insert and lookup operations for asset listings, including the
``AssetWithDetails`` projection that joins the creator and category.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.assets import Asset
from ..entities.categories import Category
from ..entities.users import User
from ..schemas.assets import AssetCreate, AssetWithDetails
from .base import AsyncBaseRepository


class AssetRepository(AsyncBaseRepository[Asset, AssetCreate]):
    """Repository for asset data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Asset, AssetCreate)

    async def get_with_details(self, asset_id: int) -> Optional[AssetWithDetails]:
        """Get an asset together with its creator and category summaries.

        Args:
            asset_id: Asset ID

        Returns:
            AssetWithDetails projection or None if the asset does not exist
        """
        stmt = (
            select(Asset, User, Category)
            .select_from(Asset)
            .join(User, Asset.creator_id == User.id)
            .join(Category, Asset.category_id == Category.id)
            .where(Asset.id == asset_id)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        asset, creator, category = row
        return AssetWithDetails.from_entities(asset, creator, category)
