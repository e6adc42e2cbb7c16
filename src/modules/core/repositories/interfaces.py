"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Filters are plain look-up mappings (``{"price__gte": 10}``) and orderings
are lists of field names with an optional ``-`` prefix, so an
implementation only has to understand those two shapes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")

Filters = Mapping[str, Any]


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> T:
        """Validate and persist a new entity, returning it with its id."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` when absent."""

    @abstractmethod
    def find(
        self,
        filters: Optional[Filters] = None,
        ordering: Sequence[str] = (),
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[T]:
        """Return one page of entities matching ``filters``."""

    @abstractmethod
    def count(self, filters: Optional[Filters] = None) -> int:
        """Count all entities matching ``filters`` (pagination ignored)."""

    @abstractmethod
    def update(self, id: str, changes: Dict[str, Any]) -> Optional[T]:
        """Apply ``changes``, re-run validators and return the stored entity."""

    @abstractmethod
    def delete(self, id: str) -> Optional[T]:
        """Remove an entity, returning its last known state."""

    @abstractmethod
    def delete_many(self, filters: Optional[Filters] = None) -> int:
        """Remove every entity matching ``filters`` and return how many."""
