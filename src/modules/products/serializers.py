"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and renders the
public camelCase representation.  Input goes through the pydantic DTOs in
``dtos.py`` instead.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "category",
            "createdAt",
            "updatedAt",
            "version",
        ]
