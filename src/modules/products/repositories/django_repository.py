"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Missing rows are reported as ``None``; the Service Layer decides how to
translate a missing entity into an API response.  Driver failures are
re-raised as ``PersistenceError`` and model validation failures as
``ProductValidationError`` so callers never see Django exceptions.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence

import structlog
from django.core.exceptions import ValidationError
from django.db import DatabaseError

from modules.core.exceptions import PersistenceError
from modules.core.repositories.interfaces import Filters
from modules.products.exceptions import (
    FieldLengthError,
    FieldRangeError,
    InvalidEnumError,
    InvalidProductId,
    MissingFieldError,
    ProductFieldError,
    ProductValidationError,
)
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

_ERROR_KINDS = {
    "blank": MissingFieldError,
    "null": MissingFieldError,
    "required": MissingFieldError,
    "min_length": FieldLengthError,
    "max_length": FieldLengthError,
    "min_value": FieldRangeError,
    "invalid": FieldRangeError,
    "invalid_choice": InvalidEnumError,
}


def _as_validation_error(exc: ValidationError) -> ProductValidationError:
    errors: List[ProductFieldError] = []
    for field, field_errors in exc.error_dict.items():
        for error in field_errors:
            kind = _ERROR_KINDS.get(error.code, ProductFieldError)
            errors.extend(kind(field, message) for message in error.messages)
    return ProductValidationError(errors)


@contextmanager
def _driver_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        logger.error("product.persistence_failed", operation=operation, error=str(exc))
        raise PersistenceError(str(exc)) from exc


def _parse_id(id: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(id))
    except ValueError:
        raise InvalidProductId(id) from None


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _validated_save(self, product: Product) -> Product:
        try:
            product.full_clean(validate_unique=False)
        except ValidationError as exc:
            raise _as_validation_error(exc) from exc
        with _driver_errors("save"):
            product.save()
        return product

    def create(self, fields: Dict[str, Any]) -> Product:
        product = self._validated_save(Product(**fields))
        logger.info("product.saved", product_id=str(product.id))
        return product

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Raises ``InvalidProductId`` when ``id`` is not a UUID.
        """
        pk = _parse_id(id)
        with _driver_errors("get_by_id"):
            return Product.objects.filter(pk=pk).first()

    def find(
        self,
        filters: Optional[Filters] = None,
        ordering: Sequence[str] = (),
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Product]:
        """List products matching Django ORM look-ups.

        Examples of valid filters::

            {"category": "Books"}
            {"price__gte": 500, "price__lte": 2000}
        """
        queryset = Product.objects.filter(**(filters or {}))
        if ordering:
            queryset = queryset.order_by(*ordering)
        end = None if limit is None else skip + limit
        with _driver_errors("find"):
            return list(queryset[skip:end])

    def count(self, filters: Optional[Filters] = None) -> int:
        with _driver_errors("count"):
            return Product.objects.filter(**(filters or {})).count()

    def update(self, id: str, changes: Dict[str, Any]) -> Optional[Product]:
        """Apply ``changes`` and return the post-write product.

        Returns ``None`` if the product no longer exists.
        """
        product = self.get_by_id(id)
        if product is None:
            return None
        for field, value in changes.items():
            setattr(product, field, value)
        product = self._validated_save(product)
        logger.info("product.saved", product_id=str(product.id))
        return product

    def delete(self, id: str) -> Optional[Product]:
        """Hard-delete a product by ID.

        Returns the product as it was before deletion, ``None`` if no
        product exists with the given ID.
        """
        product = self.get_by_id(id)
        if product is None:
            return None
        with _driver_errors("delete"):
            Product.objects.filter(pk=product.pk).delete()
        logger.info("product.deleted", product_id=str(id))
        return product

    def delete_many(self, filters: Optional[Filters] = None) -> int:
        with _driver_errors("delete_many"):
            deleted, _ = Product.objects.filter(**(filters or {})).delete()
        logger.info("product.bulk_deleted", deleted_count=deleted)
        return deleted

    def find_by_category(self, category: str) -> List[Product]:
        return self.find({"category": category})

    def find_by_price_range(
        self, min_price: Optional[float], max_price: Optional[float]
    ) -> List[Product]:
        filters: Dict[str, Any] = {}
        if min_price is not None:
            filters["price__gte"] = min_price
        if max_price is not None:
            filters["price__lte"] = max_price
        return self.find(filters)
