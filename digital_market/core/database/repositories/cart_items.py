"""
Cart item repository.

Insert and lookup operations for cart entries, including the
``CartItemWithDetails`` projection of a user's cart.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.assets import Asset
from ..entities.cart_items import CartItem
from ..entities.categories import Category
from ..entities.users import User
from ..schemas.cart_items import CartItemCreate, CartItemWithDetails
from .base import AsyncBaseRepository


class CartItemRepository(AsyncBaseRepository[CartItem, CartItemCreate]):
    """Repository for cart item data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CartItem, CartItemCreate)

    async def list_with_details_for_user(self, user_id: int) -> List[CartItemWithDetails]:
        """Get a user's cart with each asset's creator and category embedded.

        Args:
            user_id: Owner of the cart

        Returns:
            List of CartItemWithDetails in insertion order
        """
        stmt = (
            select(CartItem, Asset, User, Category)
            .select_from(CartItem)
            .join(Asset, CartItem.asset_id == Asset.id)
            .join(User, Asset.creator_id == User.id)
            .join(Category, Asset.category_id == Category.id)
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.id)
        )
        result = await self.session.execute(stmt)
        return [
            CartItemWithDetails.from_entities(cart_item, asset, creator, category)
            for cart_item, asset, creator, category in result.all()
        ]
