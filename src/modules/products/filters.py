"""Query builder for the product listing endpoint.

Turns the raw query string (``category``, ``minPrice``, ``maxPrice``,
``sort``, ``page``, ``limit``) into a ``ProductQuery``: a look-up mapping,
an ordering and a page window.  The result is storage-agnostic; the
repository decides how to execute it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Generic, List, Mapping, Tuple, TypeVar

import django_filters
import structlog
from django_filters.constants import EMPTY_VALUES

from modules.products.constants import (
    DEFAULT_LIMIT,
    DEFAULT_ORDERING,
    DEFAULT_PAGE,
    MAX_PAGE_PARAM,
    SORT_FIELDS,
)
from modules.products.models import Product

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class ProductFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(field_name="category", lookup_expr="exact")
    minPrice = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    maxPrice = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    sort = django_filters.OrderingFilter(fields=SORT_FIELDS)

    class Meta:
        model = Product
        fields = ["category", "minPrice", "maxPrice"]

    def _cleaned(self) -> Dict[str, Any]:
        self.is_valid()
        return self.form.cleaned_data

    def lookups(self) -> Dict[str, Any]:
        """Valid, non-empty filter parameters as ORM look-ups.

        Parameters that fail to parse (``minPrice=abc``) are left out, so
        that side of the range stays unbounded.
        """
        cleaned = self._cleaned()
        lookups: Dict[str, Any] = {}
        for name, flt in self.filters.items():
            if isinstance(flt, django_filters.OrderingFilter):
                continue
            value = cleaned.get(name)
            if value in EMPTY_VALUES:
                continue
            if isinstance(value, Decimal):
                value = float(value)
            key = flt.field_name
            if flt.lookup_expr != "exact":
                key = f"{key}__{flt.lookup_expr}"
            lookups[key] = value
        return lookups

    def ordering(self) -> Tuple[str, ...]:
        """``sort=-price,createdAt`` -> ``("-price", "created_at")``.

        A ``sort`` naming an unknown field is rejected as a whole and the
        listing falls back to newest first.
        """
        params = self._cleaned().get("sort")
        if not params:
            return DEFAULT_ORDERING
        flt = self.filters["sort"]
        return tuple(flt.get_ordering_value(param) for param in params)


@dataclass(frozen=True)
class ProductQuery:
    """Filter specification, ordering and page window for a listing."""

    filters: Dict[str, Any] = field(default_factory=dict)
    ordering: Tuple[str, ...] = DEFAULT_ORDERING
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class ProductPage(Generic[T]):
    """One page of results plus the size of the whole filtered set."""

    items: List[T]
    total: int
    page: int
    limit: int

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)


def parse_positive_int(raw: Any, default: int) -> int:
    """Parse ``page``/``limit``; junk and values below 1 give ``default``.

    Values above ``MAX_PAGE_PARAM`` are clamped so the SQL window stays
    representable.
    """
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    if value < 1:
        return default
    return min(value, MAX_PAGE_PARAM)


def build_product_query(params: Mapping[str, Any]) -> ProductQuery:
    """Build the listing query from request query parameters."""
    filterset = ProductFilter(data=params, queryset=Product.objects.none())
    if not filterset.is_valid():
        logger.info("product.filters_ignored", errors=filterset.errors.get_json_data())
    return ProductQuery(
        filters=filterset.lookups(),
        ordering=filterset.ordering(),
        page=parse_positive_int(params.get("page"), DEFAULT_PAGE),
        limit=parse_positive_int(params.get("limit"), DEFAULT_LIMIT),
    )
