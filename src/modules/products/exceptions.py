"""Product domain exceptions.

Raised by the Service Layer and the request validators.  The API layer
(Views) catches these and translates them into HTTP responses.
"""

from __future__ import annotations

from typing import Dict


class ProductNotFound(Exception):
    """No product exists with the requested ID."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with ID {product_id} not found.")
        self.product_id = product_id


class InvalidPagination(Exception):
    """Page number or page size is not a positive integer."""


class ProductValidationError(Exception):
    """A create/update payload broke one or more field rules.

    ``errors`` maps each offending field to its message.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))
        self.errors = errors
