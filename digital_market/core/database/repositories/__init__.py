"""
Database repository layer using SQLModel.

This package contains one repository class per table. Each provides
type-safe insert and read operations for its SQLModel entity:

- Insert through the table's insert schema, with store-enforced constraint
  violations translated into ``DatabaseError`` subclasses
- Lookup by primary key and filtered, paginated listing via the base class
- Per-table lookups (username, category name, composite asset and cart views)

Modules:
- base: AsyncBaseRepository and QueryBuilder utilities
- users, categories, assets, cart_items, purchases, ratings: table repositories
- bundle: SqlRepoBundle for dependency injection
"""

from .assets import AssetRepository
from .base import AsyncBaseRepository, QueryBuilder
from .bundle import SqlRepoBundle, build_sql_repos, build_sql_repos_from_session
from .cart_items import CartItemRepository
from .categories import CategoryRepository
from .purchases import PurchaseRepository
from .ratings import RatingRepository
from .users import UserRepository

__all__ = [
    "AssetRepository",
    "AsyncBaseRepository",
    "CartItemRepository",
    "CategoryRepository",
    "PurchaseRepository",
    "QueryBuilder",
    "RatingRepository",
    "SqlRepoBundle",
    "UserRepository",
    "build_sql_repos",
    "build_sql_repos_from_session",
]
