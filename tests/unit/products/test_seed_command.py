from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.products.management.commands.seed_products import SEED_PRODUCTS
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestSeedProductsCommand:
    def test_seeds_every_sample_product(self):
        out = StringIO()
        call_command("seed_products", stdout=out)

        assert Product.objects.count() == len(SEED_PRODUCTS)
        assert f"products={len(SEED_PRODUCTS)}" in out.getvalue()

    def test_clear_replaces_existing_products(self):
        Product(name="Leftover", price=1, category="Other").save()

        call_command("seed_products", "--clear", stdout=StringIO())

        assert Product.objects.count() == len(SEED_PRODUCTS)
        assert not Product.objects.filter(name="Leftover").exists()
