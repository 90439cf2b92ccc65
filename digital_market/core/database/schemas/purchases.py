"""
Schema models for purchase insert and read payloads.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..entities.purchases import PurchaseBase


class PurchaseCreate(PurchaseBase):
    """Insert schema for purchases.

    Omits ``id``, ``purchase_date``, ``download_count`` and
    ``last_download_date``.
    """

    model_config = ConfigDict(extra="forbid")


class PurchaseRead(BaseModel):
    """Schema for reading a purchase."""

    id: int
    user_id: int
    asset_id: int
    purchase_date: Optional[datetime] = None
    amount: float
    payment_intent_id: Optional[str] = None
    status: Optional[str] = None
    download_count: Optional[int] = None
    last_download_date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
