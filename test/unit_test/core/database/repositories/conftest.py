"""Fixtures for repository unit tests with a mocked async session."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_result():
    """Mock result returned by ``session.execute``."""
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=None)
    result.one_or_none = MagicMock(return_value=None)
    result.all = MagicMock(return_value=[])
    result.scalars.return_value.all.return_value = []
    return result


@pytest.fixture
def mock_session(mock_result):
    """Mock async database session."""
    session = AsyncMock()
    session.add = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock(return_value=mock_result)
    return session
