"""Unit tests for ProductSerializer output."""

from __future__ import annotations

import pytest

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_renders_camel_case_fields(self):
        product = Product(name="Widget", price=19.99, category="Electronics")
        product.save()

        data = ProductSerializer(product).data

        assert set(data) == {
            "id",
            "name",
            "price",
            "category",
            "createdAt",
            "updatedAt",
            "version",
        }
        assert data["id"] == str(product.id)
        assert data["price"] == 19.99
        assert data["createdAt"] == data["updatedAt"]
        assert data["version"] == 0

    def test_many(self):
        for name in ("Alpha", "Bravo"):
            Product(name=name, price=1, category="Other").save()

        data = ProductSerializer(Product.objects.order_by("name"), many=True).data
        assert [item["name"] for item in data] == ["Alpha", "Bravo"]
