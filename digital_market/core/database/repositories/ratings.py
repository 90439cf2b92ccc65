"""
Rating repository.

Insert and lookup operations for asset ratings.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.ratings import Rating
from ..schemas.ratings import RatingCreate
from .base import AsyncBaseRepository


class RatingRepository(AsyncBaseRepository[Rating, RatingCreate]):
    """Repository for rating data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Rating, RatingCreate)

    async def list_for_asset(self, asset_id: int) -> List[Rating]:
        """Get all ratings left on an asset, oldest first."""
        stmt = select(Rating).where(Rating.asset_id == asset_id).order_by(Rating.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
