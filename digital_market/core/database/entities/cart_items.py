"""
Cart item entity models.

This module contains the database entity linking a user to an asset placed
in their cart.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field

from ..base import Base, _utc_now_naive


class CartItemBase(Base):
    """Insertable fields for a cart item."""

    user_id: int = Field(foreign_key="users.id", index=True)
    asset_id: int = Field(foreign_key="assets.id", index=True)
    quantity: int = Field(default=1, sa_column_kwargs={"server_default": sa.text("1")})


class CartItem(CartItemBase, table=True):
    """Persistent cart entry.

    Table: cart_items
    """

    __tablename__ = "cart_items"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Timestamp
    added_at: Optional[datetime] = Field(
        default_factory=_utc_now_naive,
        sa_type=sa.DateTime(),
        sa_column_kwargs={"server_default": sa.func.now()},
    )

    def __repr__(self) -> str:
        return f"CartItem(id={self.id}, user_id={self.user_id}, asset_id={self.asset_id}, quantity={self.quantity})"
