"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: field rules, alias handling, frozen immutability.
- ProductDTO / ProductPageDTO: PascalCase serialization.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, ProductDTO, ProductPageDTO

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTOValid:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("9.99"), quantity=5)
        assert dto.name == "Widget"
        assert dto.price == Decimal("9.99")
        assert dto.quantity == 5

    def test_accepts_pascal_case_keys(self):
        dto = CreateProductDTO.model_validate(
            {"Name": "Widget", "Price": "9.99", "Quantity": 5}
        )
        assert dto.name == "Widget"
        assert dto.price == Decimal("9.99")

    def test_boundary_lengths_are_valid(self):
        assert CreateProductDTO(name="abc", price=Decimal("1"), quantity=0).name == "abc"
        long_name = "x" * 100
        assert CreateProductDTO(name=long_name, price=Decimal("1"), quantity=0).name == long_name

    def test_zero_quantity_is_valid(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("0.02"), quantity=0)
        assert dto.quantity == 0


class TestCreateProductDTOValidation:
    def test_short_name_raises(self):
        with pytest.raises(ValidationError, match="between 3 and 100 characters"):
            CreateProductDTO(name="AB", price=Decimal("9.99"), quantity=5)

    def test_long_name_raises(self):
        with pytest.raises(ValidationError, match="between 3 and 100 characters"):
            CreateProductDTO(name="x" * 101, price=Decimal("9.99"), quantity=5)

    def test_blank_name_raises(self):
        with pytest.raises(ValidationError, match="Name is required"):
            CreateProductDTO(name="   ", price=Decimal("9.99"), quantity=5)

    def test_price_at_floor_raises(self):
        with pytest.raises(ValidationError, match="Price must be greater than 0.01"):
            CreateProductDTO(name="Widget", price=Decimal("0.01"), quantity=5)

    def test_negative_price_raises(self):
        with pytest.raises(ValidationError, match="Price must be greater than 0.01"):
            CreateProductDTO(name="Widget", price=Decimal("-5.00"), quantity=5)

    def test_extra_decimal_places_raise(self):
        with pytest.raises(ValidationError, match="decimal_max_places"):
            CreateProductDTO(name="Widget", price=Decimal("9.999"), quantity=5)

    def test_trailing_zeros_are_not_extra_places(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("9.990"), quantity=5)
        assert dto.price == Decimal("9.99")

    def test_negative_quantity_raises(self):
        with pytest.raises(ValidationError, match="Quantity must be non-negative"):
            CreateProductDTO(name="Widget", price=Decimal("9.99"), quantity=-1)

    def test_reports_every_broken_field(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateProductDTO(name="AB", price=Decimal("0"), quantity=-1)
        assert exc_info.value.error_count() == 3


class TestCreateProductDTOFrozen:
    def test_is_immutable(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("9.99"), quantity=5)
        with pytest.raises(ValidationError):
            dto.name = "Changed"


# ===========================================================================
# Output DTOs
# ===========================================================================


class TestProductDTO:
    def test_dumps_pascal_case(self):
        dto = ProductDTO(id=1, name="Widget", price=Decimal("9.99"), quantity=5)
        assert dto.model_dump(by_alias=True) == {
            "Id": 1,
            "Name": "Widget",
            "Price": Decimal("9.99"),
            "Quantity": 5,
        }


class TestProductPageDTO:
    def test_envelope_keys(self):
        page = ProductPageDTO(
            total_items=11,
            total_pages=2,
            current_page=2,
            page_size=10,
            items=[ProductDTO(id=11, name="Widget", price=Decimal("1.50"), quantity=1)],
        )
        data = page.model_dump(by_alias=True)
        assert set(data) == {"TotalItems", "TotalPages", "CurrentPage", "PageSize", "Items"}
        assert data["Items"][0]["Id"] == 11
