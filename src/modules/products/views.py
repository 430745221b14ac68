"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Domain
exceptions are caught and translated into HTTP status codes; anything
else escapes to ``ExceptionHandlingMiddleware``.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

import structlog
from django.utils.cache import patch_cache_control
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import error_response
from modules.products.exceptions import (
    InvalidPagination,
    ProductNotFound,
    ProductValidationError,
)
from modules.products.filters import ProductFilter
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    ProductService,
)
from modules.products.validators import validate_create_product

logger = structlog.get_logger(__name__)

CACHE_MAX_AGE_SECONDS = 60
PAGE_PARAM_MAX = 2_147_483_647


def _int_param(params: Mapping[str, Any], name: str, default: int) -> int:
    raw = params.get(name)
    if raw is None or raw == "":
        return default
    value = int(raw)
    if value > PAGE_PARAM_MAX:
        raise ValueError(f"{name} exceeds {PAGE_PARAM_MAX}")
    return value


def _filter_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: params[key] for key in ProductFilter.base_filters if key in params}


def _with_cache_hint(response: Response) -> Response:
    patch_cache_control(response, public=True, max_age=CACHE_MAX_AGE_SECONDS)
    return response


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    The repository class can be swapped through ``as_view`` init kwargs;
    every request gets its own ``ProductService``.
    """

    lookup_value_regex = r"\d+"
    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products?pageNumber=&pageSize="""
        try:
            page_number = _int_param(request.query_params, "pageNumber", DEFAULT_PAGE_NUMBER)
            page_size = _int_param(request.query_params, "pageSize", DEFAULT_PAGE_SIZE)
        except ValueError:
            logger.warning(
                "product.invalid_pagination",
                page_number=request.query_params.get("pageNumber"),
                page_size=request.query_params.get("pageSize"),
            )
            return error_response(
                status.HTTP_400_BAD_REQUEST,
                "Page number and page size must be integers.",
            )

        try:
            page = self._service.list_products(
                page_number, page_size, filters=_filter_params(request.query_params)
            )
        except InvalidPagination as exc:
            return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
        except ProductValidationError as exc:
            return Response(exc.errors, status=status.HTTP_400_BAD_REQUEST)

        return _with_cache_hint(Response(page.model_dump(by_alias=True)))

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        return self._retrieve(int(pk))

    @action(detail=False, methods=["get"], url_path="id", url_name="by-query")
    def retrieve_by_query(self, request: Request) -> Response:
        """GET /api/products/id?id={pk}

        Older clients address a product through a literal ``id`` path
        segment and an ``id`` query parameter.
        """
        raw = request.query_params.get("id", "")
        if not raw.isdigit():
            logger.warning("product.invalid_id", raw_id=raw)
            return error_response(
                status.HTTP_400_BAD_REQUEST,
                "Query parameter 'id' must be a non-negative integer.",
            )
        return self._retrieve(int(raw))

    def _retrieve(self, product_id: int) -> Response:
        try:
            product = self._service.get_product(product_id)
        except ProductNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, str(exc))
        return _with_cache_hint(Response(product.model_dump(by_alias=True)))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = validate_create_product(request.data)
        except ProductValidationError as exc:
            logger.warning("product.create_rejected", errors=exc.errors)
            return Response(exc.errors, status=status.HTTP_400_BAD_REQUEST)

        product = self._service.create_product(dto)
        location = reverse(
            "product-detail", kwargs={"pk": product.id}, request=request
        )
        return Response(
            product.model_dump(by_alias=True),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        product_id = int(pk)
        try:
            dto = validate_create_product(request.data)
        except ProductValidationError as exc:
            logger.warning(
                "product.update_rejected", product_id=product_id, errors=exc.errors
            )
            return Response(exc.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            self._service.update_product(product_id, dto)
        except ProductNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, str(exc))
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(int(pk))
        except ProductNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, str(exc))
        return Response(status=status.HTTP_204_NO_CONTENT)
