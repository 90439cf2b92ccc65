"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .assets import AssetRepository
from .cart_items import CartItemRepository
from .categories import CategoryRepository
from .purchases import PurchaseRepository
from .ratings import RatingRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    users: UserRepository
    categories: CategoryRepository
    assets: AssetRepository
    cart_items: CartItemRepository
    purchases: PurchaseRepository
    ratings: RatingRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        categories=CategoryRepository(session),
        assets=AssetRepository(session),
        cart_items=CartItemRepository(session),
        purchases=PurchaseRepository(session),
        ratings=RatingRepository(session),
    )


@asynccontextmanager
async def build_sql_repos(*, session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[SqlRepoBundle]:
    """Open a session from the factory and yield a bundle bound to it.

    The session is closed when the context exits.

    Args:
        session_factory: Async session factory for creating sessions

    Yields:
        Bundle containing all repository instances
    """
    async with session_factory() as session:
        yield build_sql_repos_from_session(session=session)
