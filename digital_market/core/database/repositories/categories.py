"""
Category repository.

Insert and lookup operations for asset categories.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.categories import Category
from ..schemas.categories import CategoryCreate
from .base import AsyncBaseRepository


class CategoryRepository(AsyncBaseRepository[Category, CategoryCreate]):
    """Repository for category data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Category, CategoryCreate)

    async def get_by_name(self, name: str) -> Optional[Category]:
        """Get a category by its unique name.

        Args:
            name: Category name

        Returns:
            Category instance or None
        """
        stmt = select(Category).where(Category.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
