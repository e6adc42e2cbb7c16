"""Product URL configuration (mounted at ``api/products``).

The prefix pattern consumes an optional slash after ``api/products`` and
every route accepts an optional trailing slash.
"""

from __future__ import annotations

from django.urls import re_path

from modules.products.views import ProductViewSet

product_collection = ProductViewSet.as_view(
    {"get": "list", "post": "create", "delete": "destroy_all"}
)
products_by_category = ProductViewSet.as_view({"get": "by_category"})
product_detail = ProductViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"}
)

urlpatterns = [
    re_path(r"^$", product_collection, name="product-list"),
    re_path(
        r"^category/(?P<category>[^/]+)/?$",
        products_by_category,
        name="product-by-category",
    ),
    re_path(r"^(?P<pk>[^/]+)/?$", product_detail, name="product-detail"),
]
