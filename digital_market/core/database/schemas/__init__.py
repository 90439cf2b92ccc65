"""
Database schema models for insert and read payloads.

Insert schemas (``*Create``) are derived from the insertable fields of each
entity and reject server-generated fields. Read schemas (``*Read``) and the
composite views (``AssetWithDetails``, ``CartItemWithDetails``) are plain
Pydantic models loaded from entity attributes.
"""

from .assets import AssetCreate, AssetRead, AssetWithDetails, CategorySummary, CreatorSummary
from .cart_items import CartItemCreate, CartItemRead, CartItemWithDetails
from .categories import CategoryCreate, CategoryRead
from .purchases import PurchaseCreate, PurchaseRead
from .ratings import RatingCreate, RatingRead
from .users import UserCreate, UserRead

__all__ = [
    "AssetCreate",
    "AssetRead",
    "AssetWithDetails",
    "CartItemCreate",
    "CartItemRead",
    "CartItemWithDetails",
    "CategoryCreate",
    "CategoryRead",
    "CategorySummary",
    "CreatorSummary",
    "PurchaseCreate",
    "PurchaseRead",
    "RatingCreate",
    "RatingRead",
    "UserCreate",
    "UserRead",
]
