"""Test configuration for database integration tests.

Every test runs against a fresh in-memory SQLite database with the full
table layout created and foreign keys enforced.
"""

from __future__ import annotations

from test.settings import test_settings
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool

from digital_market.core.database import create_all, create_engine, create_sessionmaker
from digital_market.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(test_settings.database.url, poolclass=StaticPool)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Open a session on the test database."""
    session_factory = create_sessionmaker(db_engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
def repos(db_session) -> SqlRepoBundle:
    """Create repository bundle bound to the test session."""
    return build_sql_repos_from_session(session=db_session)


@pytest.fixture
async def creator(repos):
    return await repos.users.insert(
        {"username": "pixelsmith", "password": "s3cret", "display_name": "Pixel Smith", "is_creator": True}
    )


@pytest.fixture
async def buyer(repos):
    return await repos.users.insert({"username": "collector", "password": "hunter2", "display_name": "Avid Collector"})


@pytest.fixture
async def category(repos):
    return await repos.categories.insert({"name": "3D Models", "icon_name": "ri-box-3-line"})


@pytest.fixture
async def asset(repos, creator, category):
    return await repos.assets.insert(
        {
            "title": "Low-poly tavern kit",
            "preview_url": "https://cdn.example.com/previews/tavern.png",
            "price": 19.99,
            "category_id": category.id,
            "creator_id": creator.id,
            "tags": ["low-poly", "fantasy", "interior"],
            "thumbnails": ["https://cdn.example.com/thumbs/tavern-1.png"],
        }
    )
