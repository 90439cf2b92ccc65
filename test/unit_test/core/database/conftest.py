"""Test configuration for database unit tests.

This module provides common sample payloads and entities for testing the
database layer without a real database.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from digital_market.core.database.entities import Asset, CartItem, Category, User


@pytest.fixture(scope="function")
def sample_user_data() -> dict:
    """Sample user insert payload."""
    return {
        "username": "pixelsmith",
        "password": "s3cret",
        "display_name": "Pixel Smith",
        "bio": "Makes low-poly props",
        "avatar_url": "https://cdn.example.com/avatars/pixelsmith.png",
        "is_creator": True,
    }


@pytest.fixture(scope="function")
def sample_category_data() -> dict:
    """Sample category insert payload."""
    return {
        "name": "3D Models",
        "description": "Meshes, props and characters",
        "icon_name": "ri-box-3-line",
    }


@pytest.fixture(scope="function")
def sample_asset_data() -> dict:
    """Sample asset insert payload."""
    return {
        "title": "Low-poly tavern kit",
        "description": "42 modular tavern pieces",
        "preview_url": "https://cdn.example.com/previews/tavern.png",
        "price": 19.99,
        "category_id": 1,
        "creator_id": 1,
        "tags": ["low-poly", "fantasy", "interior"],
        "featured": False,
        "thumbnails": ["https://cdn.example.com/thumbs/tavern-1.png", "https://cdn.example.com/thumbs/tavern-2.png"],
        "file_url": "assets/tavern-kit.zip",
        "file_type": "zip",
        "file_size": 10485760,
        "s3_object_key": "uploads/2024/tavern-kit.zip",
    }


@pytest.fixture(scope="function")
def sample_cart_item_data() -> dict:
    """Sample cart item insert payload."""
    return {"user_id": 2, "asset_id": 1, "quantity": 1}


@pytest.fixture(scope="function")
def sample_purchase_data() -> dict:
    """Sample purchase insert payload."""
    return {
        "user_id": 2,
        "asset_id": 1,
        "amount": 19.99,
        "payment_intent_id": "pi_3Nx8Yh2eZvKYlo2C",
    }


@pytest.fixture(scope="function")
def sample_rating_data() -> dict:
    """Sample rating insert payload."""
    return {"user_id": 2, "asset_id": 1, "rating": 5, "comment": "Great kit"}


@pytest.fixture(scope="function")
def sample_user(sample_user_data) -> User:
    """Persisted-looking user entity."""
    return User(id=1, joined_at=datetime(2024, 1, 2, 3, 4, 5), **sample_user_data)


@pytest.fixture(scope="function")
def sample_category(sample_category_data) -> Category:
    """Persisted-looking category entity."""
    return Category(id=1, asset_count=3, **sample_category_data)


@pytest.fixture(scope="function")
def sample_asset(sample_asset_data) -> Asset:
    """Persisted-looking asset entity."""
    return Asset(id=1, created_at=datetime(2024, 2, 3, 4, 5, 6), download_count=12, rating=4.5, **sample_asset_data)


@pytest.fixture(scope="function")
def sample_cart_item(sample_cart_item_data) -> CartItem:
    """Persisted-looking cart item entity."""
    return CartItem(id=7, added_at=datetime(2024, 3, 4, 5, 6, 7), **sample_cart_item_data)
