"""Product entity.

Field rules:
- ``name`` is 3 to 100 characters long.
- ``price`` is strictly greater than 0.01.
- ``quantity`` cannot be negative.

``id`` is an auto-increment integer assigned by the database and never
changes after the row is inserted.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, MinLengthValidator
from django.db import models

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
PRICE_FLOOR = Decimal("0.01")
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2
QUANTITY_MAX = 2_147_483_647


class Product(models.Model):
    """A sellable item with its unit price and quantity on hand."""

    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        validators=[
            MinLengthValidator(NAME_MIN_LENGTH),
            MaxLengthValidator(NAME_MAX_LENGTH),
        ],
    )
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    quantity = models.PositiveIntegerField()

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=PRICE_FLOOR),
                name="products_price_above_floor",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name="products_quantity_non_negative",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price <= PRICE_FLOOR:
            raise ValidationError({"price": "Price must be greater than 0.01."})

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
