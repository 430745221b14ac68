"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.  Missing
rows are reported with ``None``/``False`` instead of exceptions; the
Service Layer decides how to turn a missing product into an HTTP
response.  Database errors are not caught here.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import models, transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def query(self) -> models.QuerySet:
        """Lazy queryset over all products in id order.

        Nothing is fetched until the caller counts, slices or iterates.
        """
        return Product.objects.all()

    def list(self) -> List[Product]:
        return list(self.query())

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.filter(pk=id).first()

    def exists(self, id: int) -> bool:
        return Product.objects.filter(pk=id).exists()

    @transaction.atomic
    def add(self, entity: Product) -> Product:
        """Insert a new product; ``entity.id`` is set by the database."""
        entity.save(force_insert=True)
        logger.info("product.inserted", product_id=entity.id)
        return entity

    @transaction.atomic
    def update(self, entity: Product) -> Product:
        """Overwrite name, price and quantity of the row with ``entity.id``.

        Updating an id that has no row touches nothing.
        """
        updated = Product.objects.filter(pk=entity.id).update(
            name=entity.name,
            price=entity.price,
            quantity=entity.quantity,
        )
        logger.info("product.row_updated", product_id=entity.id, rows=updated)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if none matched.
        """
        deleted, _ = Product.objects.filter(pk=id).delete()
        logger.info("product.row_deleted", product_id=id, rows=deleted)
        return deleted > 0
