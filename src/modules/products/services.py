"""Product service layer (Use Cases).

Orchestrates validation, the listing query builder and persistence for the
Product aggregate, delegating storage to the injected
``IProductRepository``.

No transactions or locks are taken: update and delete check that the
product exists and then act, so a concurrent delete in between surfaces
as ``ProductNotFound``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Mapping

import structlog

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.filters import ProductPage, ProductQuery

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, data: Mapping[str, Any]) -> Product:
        """Validate a request body and persist a new product.

        Raises:
            MissingProductFields: name, price or category not supplied.
            ProductValidationError: a supplied field is invalid.
        """
        dto = CreateProductDTO.from_payload(data)
        product = self._repo.create(dto.model_dump())
        logger.info("product.created", product_id=str(product.id))
        return product

    def update_product(self, id: str, data: Mapping[str, Any]) -> Product:
        """Update an existing product with the supplied fields.

        Raises:
            ProductNotFound: if the product does not exist (or vanished
                before the write).
            ProductValidationError: a supplied field is invalid.
        """
        self.get_product(id)
        dto = UpdateProductDTO.from_payload(data)

        product = self._repo.update(id, dto.changes())
        if product is None:
            raise ProductNotFound(id)

        logger.info(
            "product.updated", product_id=str(id), fields=sorted(dto.changes())
        )
        return product

    def delete_product(self, id: str) -> Product:
        """Delete a product and return its last known state.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        deleted = self._repo.delete(id)
        logger.info("product.deleted", product_id=str(id))
        return deleted if deleted is not None else product

    def delete_all_products(self) -> int:
        """Remove every product unconditionally, returning how many."""
        deleted = self._repo.delete_many()
        logger.warning("product.all_deleted", deleted_count=deleted)
        return deleted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, query: ProductQuery) -> ProductPage[Product]:
        """Return one page of products plus the size of the filtered set."""
        items = self._repo.find(
            query.filters,
            ordering=query.ordering,
            skip=query.skip,
            limit=query.limit,
        )
        total = self._repo.count(query.filters)
        return ProductPage(items=items, total=total, page=query.page, limit=query.limit)

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
            InvalidProductId: if ``id`` is malformed.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(id)
        return product

    def list_by_category(self, category: str) -> List[Product]:
        """All products in ``category``; unknown categories yield ``[]``."""
        return self._repo.find_by_category(category)
