"""Unit tests for the insert schemas.

Every insert schema is derived from its table's insertable fields and must
reject the fields the store generates.
"""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from digital_market.core.database.schemas import (
    AssetCreate,
    CartItemCreate,
    CategoryCreate,
    PurchaseCreate,
    RatingCreate,
    UserCreate,
)


def _error_types(exc_info) -> dict:
    return {error["loc"][0]: error["type"] for error in exc_info.value.errors()}


class TestUserCreate:
    """Tests for the user insert schema."""

    def test_valid_payload(self, sample_user_data):
        user = UserCreate(**sample_user_data)

        assert user.username == "pixelsmith"
        assert user.is_creator is True

    def test_defaults(self):
        user = UserCreate(username="ada", password="pw", display_name="Ada")

        assert user.is_creator is False
        assert user.bio is None
        assert user.avatar_url is None

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            UserCreate()

        assert {"username", "password", "display_name"} <= set(_error_types(exc_info))

    def test_nullable_fields_accept_none(self, sample_user_data):
        data = {**sample_user_data, "bio": None, "avatar_url": None}

        user = UserCreate(**data)

        assert user.bio is None
        assert user.avatar_url is None


class TestCategoryCreate:
    """Tests for the category insert schema."""

    def test_asset_count_is_insertable(self, sample_category_data):
        category = CategoryCreate(**sample_category_data, asset_count=5)

        assert category.asset_count == 5

    def test_asset_count_default(self, sample_category_data):
        assert CategoryCreate(**sample_category_data).asset_count == 0

    def test_missing_icon_name(self):
        with pytest.raises(ValidationError) as exc_info:
            CategoryCreate(name="Audio")

        assert _error_types(exc_info) == {"icon_name": "missing"}


class TestAssetCreate:
    """Tests for the asset insert schema."""

    def test_valid_payload(self, sample_asset_data):
        asset = AssetCreate(**sample_asset_data)

        assert asset.price == 19.99
        assert asset.tags == ["low-poly", "fantasy", "interior"]

    def test_defaults(self):
        asset = AssetCreate(
            title="Brush pack",
            preview_url="https://cdn.example.com/brushes.png",
            price=4,
            category_id=1,
            creator_id=1,
        )

        assert asset.featured is False
        assert asset.tags is None
        assert asset.thumbnails is None
        assert asset.file_size is None

    def test_tag_order_is_kept(self, sample_asset_data):
        data = {**sample_asset_data, "tags": ["zeta", "alpha", "mid"]}

        assert AssetCreate(**data).tags == ["zeta", "alpha", "mid"]

    def test_price_must_be_numeric(self, sample_asset_data):
        data = {**sample_asset_data, "price": "free"}

        with pytest.raises(ValidationError) as exc_info:
            AssetCreate(**data)

        assert "price" in _error_types(exc_info)

    def test_missing_references(self, sample_asset_data):
        data = {k: v for k, v in sample_asset_data.items() if k not in ("category_id", "creator_id")}

        with pytest.raises(ValidationError) as exc_info:
            AssetCreate(**data)

        assert set(_error_types(exc_info)) == {"category_id", "creator_id"}


class TestCartItemCreate:
    """Tests for the cart item insert schema."""

    def test_quantity_default(self):
        assert CartItemCreate(user_id=1, asset_id=2).quantity == 1


class TestPurchaseCreate:
    """Tests for the purchase insert schema."""

    def test_status_default(self, sample_purchase_data):
        purchase = PurchaseCreate(**sample_purchase_data)

        assert purchase.status == "completed"
        assert purchase.payment_intent_id == "pi_3Nx8Yh2eZvKYlo2C"

    def test_missing_amount(self):
        with pytest.raises(ValidationError) as exc_info:
            PurchaseCreate(user_id=1, asset_id=2)

        assert _error_types(exc_info) == {"amount": "missing"}


class TestRatingCreate:
    """Tests for the rating insert schema."""

    def test_valid_payload(self, sample_rating_data):
        rating = RatingCreate(**sample_rating_data)

        assert rating.rating == 5
        assert rating.comment == "Great kit"

    @pytest.mark.parametrize("value", [0, 6, 42])
    def test_out_of_range_rating_is_accepted(self, value):
        assert RatingCreate(user_id=1, asset_id=2, rating=value).rating == value


_NOW = datetime(2024, 5, 6, 7, 8, 9)


@pytest.mark.parametrize(
    "schema, payload_fixture, field_name, value",
    [
        (UserCreate, "sample_user_data", "id", 1),
        (UserCreate, "sample_user_data", "joined_at", _NOW),
        (CategoryCreate, "sample_category_data", "id", 1),
        (AssetCreate, "sample_asset_data", "id", 1),
        (AssetCreate, "sample_asset_data", "created_at", _NOW),
        (AssetCreate, "sample_asset_data", "download_count", 10),
        (AssetCreate, "sample_asset_data", "rating", 4.5),
        (CartItemCreate, "sample_cart_item_data", "id", 1),
        (CartItemCreate, "sample_cart_item_data", "added_at", _NOW),
        (PurchaseCreate, "sample_purchase_data", "id", 1),
        (PurchaseCreate, "sample_purchase_data", "purchase_date", _NOW),
        (PurchaseCreate, "sample_purchase_data", "download_count", 3),
        (PurchaseCreate, "sample_purchase_data", "last_download_date", _NOW),
        (RatingCreate, "sample_rating_data", "id", 1),
        (RatingCreate, "sample_rating_data", "created_at", _NOW),
        (RatingCreate, "sample_rating_data", "updated_at", _NOW),
    ],
)
def test_server_generated_fields_are_rejected(request, schema, payload_fixture, field_name, value):
    payload = {**request.getfixturevalue(payload_fixture), field_name: value}

    with pytest.raises(ValidationError) as exc_info:
        schema.model_validate(payload)

    assert _error_types(exc_info) == {field_name: "extra_forbidden"}


def test_unknown_fields_are_rejected(sample_user_data):
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(**sample_user_data, email="ada@example.com")

    assert _error_types(exc_info) == {"email": "extra_forbidden"}
