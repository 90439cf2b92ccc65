"""
Database entity models.

This package contains all database entity models, one module per table.
Each module declares an insertable ``*Base`` model and the ``table=True``
entity that adds the server-generated fields.

Modules:
- users: Marketplace users and creators
- categories: Asset categories
- assets: Purchasable digital assets
- cart_items: Assets placed in a user's cart
- purchases: Completed or pending purchases
- ratings: Star ratings and reviews
"""

from .assets import Asset
from .cart_items import CartItem
from .categories import Category
from .purchases import Purchase
from .ratings import Rating
from .users import User

__all__ = [
    "Asset",
    "CartItem",
    "Category",
    "Purchase",
    "Rating",
    "User",
]
