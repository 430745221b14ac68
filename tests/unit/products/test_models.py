"""Unit tests for the Product model.

Covers:
- Creation and store-assigned integer ids.
- Field validation through ``full_clean``.
- Database check constraints.
- Default ordering and __str__.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from modules.products.models import Product

pytestmark = pytest.mark.unit


def _make_product(**overrides) -> Product:
    """Build and full_clean a Product, returning the unsaved instance."""
    defaults = {
        "name": "Test Product",
        "price": Decimal("29.90"),
        "quantity": 100,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.full_clean()
    return product


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(name="Widget", price=Decimal("19.99"), quantity=50)
        p.refresh_from_db()
        assert p.name == "Widget"
        assert p.price == Decimal("19.99")
        assert p.quantity == 50

    def test_ids_are_assigned_by_the_store(self):
        first = Product.objects.create(name="First", price=Decimal("1.00"), quantity=1)
        second = Product.objects.create(name="Second", price=Decimal("1.00"), quantity=1)
        assert isinstance(first.id, int)
        assert second.id > first.id


class TestFieldValidation:
    def test_short_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_product(name="AB")
        assert "name" in exc_info.value.message_dict

    def test_long_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_product(name="x" * 101)
        assert "name" in exc_info.value.message_dict

    def test_price_at_floor_rejected(self):
        with pytest.raises(ValidationError, match="Price must be greater than 0.01"):
            _make_product(price=Decimal("0.01"))

    def test_smallest_valid_price(self):
        p = _make_product(price=Decimal("0.02"))
        assert p.price == Decimal("0.02")

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_product(quantity=-1)
        assert "quantity" in exc_info.value.message_dict


class TestDatabaseConstraints:
    def test_price_constraint(self):
        with pytest.raises(IntegrityError):
            Product.objects.create(name="Too Cheap", price=Decimal("0.01"), quantity=1)

    def test_quantity_constraint(self):
        with pytest.raises(IntegrityError):
            Product.objects.create(name="Negative", price=Decimal("1.00"), quantity=-1)


class TestProductDisplay:
    def test_default_ordering_is_by_id(self):
        b = Product.objects.create(name="Bravo", price=Decimal("1.00"), quantity=1)
        a = Product.objects.create(name="Alpha", price=Decimal("1.00"), quantity=1)
        assert list(Product.objects.all()) == [b, a]

    def test_str_representation(self):
        p = Product.objects.create(name="Display", price=Decimal("1.00"), quantity=1)
        assert str(p) == f"#{p.id} Display"
