"""Product service layer (Use Cases).

Orchestrates the Product use cases, delegating persistence to the
injected ``IProductRepository`` and shaping results with the mappers.
Every outcome is logged with the identifiers needed to reconstruct it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

import structlog

from modules.products.dtos import ProductPageDTO
from modules.products.exceptions import (
    InvalidPagination,
    ProductNotFound,
    ProductValidationError,
)
from modules.products.filters import ProductFilter
from modules.products.mappers import apply_to_entity, to_entity, to_product_dto

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(
        self,
        page_number: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> ProductPageDTO:
        """Return one page of products.

        Raises:
            InvalidPagination: if either value is below 1.  The store is
                not queried in that case.
            ProductValidationError: if a filter value cannot be parsed.
        """
        log = logger.bind(page_number=page_number, page_size=page_size)

        if page_number <= 0 or page_size <= 0:
            log.warning("product.invalid_pagination")
            raise InvalidPagination(
                "Page number and page size must be greater than zero."
            )

        query = self._repo.query()
        if filters:
            filterset = ProductFilter(data=filters, queryset=query)
            if not filterset.is_valid():
                errors = {
                    field: " ".join(str(m) for m in messages)
                    for field, messages in filterset.errors.items()
                }
                log.warning("product.invalid_filters", errors=errors)
                raise ProductValidationError(errors)
            query = filterset.qs

        total_items = query.count()
        total_pages = -(-total_items // page_size)
        offset = (page_number - 1) * page_size
        products = list(query[offset : offset + page_size])

        log.info(
            "product.page_listed",
            total_items=total_items,
            total_pages=total_pages,
            items_returned=len(products),
        )
        return ProductPageDTO(
            total_items=total_items,
            total_pages=total_pages,
            current_page=page_number,
            page_size=page_size,
            items=[to_product_dto(p) for p in products],
        )

    def get_product(self, id: int) -> ProductDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound(id)
        logger.info("product.retrieved", product_id=id)
        return to_product_dto(product)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> ProductDTO:
        product = self._repo.add(to_entity(dto))
        logger.info("product.created", product_id=product.id)
        return to_product_dto(product)

    def update_product(self, id: int, dto: CreateProductDTO) -> None:
        """Overwrite name, price and quantity of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.warning("product.update_missing", product_id=id)
            raise ProductNotFound(id)

        self._repo.update(apply_to_entity(dto, product))
        logger.info("product.updated", product_id=id)

    def delete_product(self, id: int) -> None:
        """Remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.exists(id):
            logger.warning("product.delete_missing", product_id=id)
            raise ProductNotFound(id)
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)
