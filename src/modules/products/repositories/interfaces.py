"""Product repository interface.

The gateway is the only component allowed to talk to the store.  The
product contract is exactly the generic one; it exists so services and
tests can depend on a product-specific abstraction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""
