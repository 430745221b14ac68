"""Field copies between the ``Product`` entity and its DTOs."""

from __future__ import annotations

from modules.products.dtos import CreateProductDTO, ProductDTO
from modules.products.models import Product


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=product.price,
        quantity=product.quantity,
    )


def to_entity(dto: CreateProductDTO) -> Product:
    """Build an unsaved ``Product``; the database assigns ``id`` on insert."""
    return Product(name=dto.name, price=dto.price, quantity=dto.quantity)


def apply_to_entity(dto: CreateProductDTO, product: Product) -> Product:
    """Overwrite the writable fields of ``product`` in place; ``id`` is kept."""
    product.name = dto.name
    product.price = dto.price
    product.quantity = dto.quantity
    return product
