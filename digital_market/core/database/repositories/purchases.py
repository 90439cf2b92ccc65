"""
Purchase repository.

Insert and lookup operations for purchase records.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.purchases import Purchase
from ..schemas.purchases import PurchaseCreate
from .base import AsyncBaseRepository


class PurchaseRepository(AsyncBaseRepository[Purchase, PurchaseCreate]):
    """Repository for purchase data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Purchase, PurchaseCreate)

    async def list_for_user(self, user_id: int) -> List[Purchase]:
        """Get all purchases made by a user, oldest first."""
        stmt = select(Purchase).where(Purchase.user_id == user_id).order_by(Purchase.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
