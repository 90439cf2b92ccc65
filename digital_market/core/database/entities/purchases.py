"""
Purchase entity models.

This module contains the database entity recording that a user bought an
asset, together with the amount charged and the payment status.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field

from ..base import Base, _utc_now_naive

DEFAULT_PURCHASE_STATUS = "completed"


class PurchaseBase(Base):
    """Insertable fields for a purchase."""

    user_id: int = Field(foreign_key="users.id", index=True)
    asset_id: int = Field(foreign_key="assets.id", index=True)
    amount: float = Field(sa_type=sa.REAL(), description="Amount charged")
    payment_intent_id: Optional[str] = Field(default=None, description="Payment provider intent identifier")
    status: Optional[str] = Field(
        default=DEFAULT_PURCHASE_STATUS,
        sa_column_kwargs={"server_default": DEFAULT_PURCHASE_STATUS},
        description="Free-text state marker",
    )


class Purchase(PurchaseBase, table=True):
    """Persistent purchase record.

    Table: purchases
    """

    __tablename__ = "purchases"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Timestamps
    purchase_date: Optional[datetime] = Field(
        default_factory=_utc_now_naive,
        sa_type=sa.DateTime(),
        sa_column_kwargs={"server_default": sa.func.now()},
    )
    last_download_date: Optional[datetime] = Field(default=None, sa_type=sa.DateTime())

    # Server-maintained counter
    download_count: Optional[int] = Field(default=0, sa_column_kwargs={"server_default": sa.text("0")})

    def __repr__(self) -> str:
        return f"Purchase(id={self.id}, user_id={self.user_id}, asset_id={self.asset_id}, status={self.status})"
