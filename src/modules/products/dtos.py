"""Product DTOs for the transport boundary.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``).  Attributes are snake_case in Python and
PascalCase on the wire (``Name``, ``TotalItems``); input is accepted
under either spelling.

- ``CreateProductDTO``: body of create and update requests.
- ``ProductDTO``: a single product in responses.
- ``ProductPageDTO``: paginated envelope returned by the list endpoint.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_pascal

from modules.products.models import (
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_FLOOR,
    PRICE_MAX_DIGITS,
    QUANTITY_MAX,
)

_TRANSPORT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_pascal,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product create/update requests.

    Validates:
    - ``name`` is non-blank and 3 to 100 characters long.
    - ``price`` is greater than 0.01 with at most 2 decimal places and
      18 digits, so it is stored exactly as given.
    - ``quantity`` is between 0 and 2147483647.
    """

    model_config = _TRANSPORT_CONFIG

    name: str
    price: Decimal = Field(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    quantity: int

    @field_validator("name")
    @classmethod
    def name_must_fit_length(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required.")
        if not NAME_MIN_LENGTH <= len(v) <= NAME_MAX_LENGTH:
            raise ValueError(
                f"Name must be between {NAME_MIN_LENGTH} and "
                f"{NAME_MAX_LENGTH} characters."
            )
        return v

    @field_validator("price")
    @classmethod
    def price_must_exceed_floor(cls, v: Decimal) -> Decimal:
        if v <= PRICE_FLOOR:
            raise ValueError(f"Price must be greater than {PRICE_FLOOR}.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_in_range(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity must be non-negative.")
        if v > QUANTITY_MAX:
            raise ValueError(f"Quantity must not exceed {QUANTITY_MAX}.")
        return v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class ProductDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = _TRANSPORT_CONFIG

    id: int
    name: str
    price: Decimal
    quantity: int


class ProductPageDTO(BaseModel):
    """One page of products plus the numbers needed to walk the rest."""

    model_config = _TRANSPORT_CONFIG

    total_items: int
    total_pages: int
    current_page: int
    page_size: int
    items: List[ProductDTO]
