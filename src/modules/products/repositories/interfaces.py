"""Product repository interface.

Extends ``IRepository[Product]`` with the catalogue look-ups and pins
down the closed set of errors an implementation may raise:

- ``InvalidProductId``: the identifier is malformed.
- ``ProductValidationError``: a write would break a field invariant.
- ``PersistenceError``: the storage backend failed.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_by_category(self, category: str) -> List["Product"]:
        """All products in ``category`` (no check against known categories)."""

    @abstractmethod
    def find_by_price_range(
        self, min_price: Optional[float], max_price: Optional[float]
    ) -> List["Product"]:
        """Products priced within the inclusive range; ``None`` is unbounded."""
