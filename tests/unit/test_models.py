"""
Unit tests for table model defaults.
"""

from datetime import timezone

from app.models.cart import CartItem
from app.models.ids import parse_object_id
from app.models.user import User


class TestTimestamps:

    def test_user_timestamps_are_utc_aware(self):
        user = User(first_name="Jane", last_name="Doe", email="jane@example.com", password="x")

        assert user.created_at.tzinfo == timezone.utc
        assert user.updated_at.tzinfo == timezone.utc
        assert user.last_login is None

    def test_cart_item_timestamp_is_utc_aware(self):
        item = CartItem(user_id="u", product_id=205)
        assert item.added_at.tzinfo == timezone.utc
        assert item.quantity == 1


class TestIdentifiers:

    def test_new_ids_are_hex(self):
        user = User(first_name="Jane", last_name="Doe", email="jane@example.com", password="x")
        assert parse_object_id(user.id) == user.id
        assert len(user.id) == 32
