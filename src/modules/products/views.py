"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into the response envelope;
anything else is left to ``JsonErrorMiddleware``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import PersistenceError
from modules.core.responses import error_response, success_response
from modules.products.constants import MISSING_FIELDS_MESSAGE
from modules.products.exceptions import (
    MissingProductFields,
    ProductNotFound,
    ProductValidationError,
)
from modules.products.filters import build_product_query
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)


def _payload(request: Request) -> Mapping[str, Any]:
    return request.data if isinstance(request.data, Mapping) else {}


def _server_error(exc: PersistenceError) -> Response:
    return error_response(
        "Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error=str(exc),
    )


def _not_found(exc: ProductNotFound) -> Response:
    return error_response(str(exc), status=status.HTTP_404_NOT_FOUND)


def _invalid(exc: ProductValidationError) -> Response:
    message = (
        MISSING_FIELDS_MESSAGE
        if isinstance(exc, MissingProductFields)
        else "Validation Error"
    )
    logger.info("product.validation_failed", errors=exc.messages)
    return error_response(
        message, status=status.HTTP_400_BAD_REQUEST, errors=exc.messages
    )


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP); every
    ORM access goes through the service/repository layer.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        query = build_product_query(request.query_params)
        try:
            page = self._service.list_products(query)
        except PersistenceError as exc:
            return _server_error(exc)

        return success_response(
            ProductSerializer(page.items, many=True).data,
            count=page.count,
            total=page.total,
            page=page.page,
            totalPages=page.total_pages,
        )

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            product = self._service.create_product(_payload(request))
        except ProductValidationError as exc:
            return _invalid(exc)
        except PersistenceError as exc:
            return _server_error(exc)

        return success_response(
            ProductSerializer(product).data,
            message="Product created successfully",
            status=status.HTTP_201_CREATED,
        )

    def destroy_all(self, request: Request) -> Response:
        """DELETE /api/products"""
        try:
            deleted = self._service.delete_all_products()
        except PersistenceError as exc:
            return _server_error(exc)

        return success_response(
            message=f"Successfully deleted {deleted} products",
            deletedCount=deleted,
        )

    def by_category(self, request: Request, category: str) -> Response:
        """GET /api/products/category/{category}"""
        try:
            products = self._service.list_by_category(category)
        except PersistenceError as exc:
            return _server_error(exc)

        return success_response(
            ProductSerializer(products, many=True).data,
            count=len(products),
        )

    # ------------------------------------------------------------------
    # Single product
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound as exc:
            return _not_found(exc)
        except PersistenceError as exc:
            return _server_error(exc)

        return success_response(ProductSerializer(product).data)

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/products/{pk}"""
        try:
            product = self._service.update_product(pk, _payload(request))
        except ProductNotFound as exc:
            return _not_found(exc)
        except ProductValidationError as exc:
            return _invalid(exc)
        except PersistenceError as exc:
            return _server_error(exc)

        return success_response(
            ProductSerializer(product).data,
            message="Product updated successfully",
        )

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            product = self._service.delete_product(pk)
        except ProductNotFound as exc:
            return _not_found(exc)
        except PersistenceError as exc:
            return _server_error(exc)

        return success_response(
            ProductSerializer(product).data,
            message="Product deleted successfully",
        )
