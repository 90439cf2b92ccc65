"""
Schema models for cart item insert and read payloads.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..entities.assets import Asset
from ..entities.cart_items import CartItem, CartItemBase
from ..entities.categories import Category
from ..entities.users import User
from .assets import AssetWithDetails


class CartItemCreate(CartItemBase):
    """Insert schema for cart items (omits ``id`` and ``added_at``)."""

    model_config = ConfigDict(extra="forbid")


class CartItemRead(BaseModel):
    """Schema for reading a cart item."""

    id: int
    user_id: int
    asset_id: int
    added_at: Optional[datetime] = None
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class CartItemWithDetails(CartItemRead):
    """Cart item with the fully detailed asset embedded (read-only)."""

    asset: AssetWithDetails = Field(description="The asset in the cart, with creator and category")

    @classmethod
    def from_entities(
        cls, cart_item: CartItem, asset: Asset, creator: User, category: Category
    ) -> CartItemWithDetails:
        """Build the projection from loaded entities."""
        return cls(
            **CartItemRead.model_validate(cart_item).model_dump(),
            asset=AssetWithDetails.from_entities(asset, creator, category),
        )
