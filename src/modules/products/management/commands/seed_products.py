from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.constants import ProductCategory
from modules.products.exceptions import ProductValidationError
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("Laptop Pro 15", 1499.99, ProductCategory.ELECTRONICS),
    ("Wireless Mouse", 24.5, ProductCategory.ELECTRONICS),
    ("Noise Cancelling Headphones", 899.0, ProductCategory.ELECTRONICS),
    ("Cotton T-Shirt", 19.99, ProductCategory.CLOTHING),
    ("Denim Jacket", 79.9, ProductCategory.CLOTHING),
    ("Organic Coffee Beans", 12.75, ProductCategory.FOOD),
    ("Dark Chocolate Bar", 3.2, ProductCategory.FOOD),
    ("The Pragmatic Programmer", 42.0, ProductCategory.BOOKS),
    ("Fluent Python", 55.0, ProductCategory.BOOKS),
    ("Building Blocks Set", 59.99, ProductCategory.TOYS),
    ("Leather Wallet", 35.0, ProductCategory.ACCESSORIES),
    ("Fountain Pen", 120.0, ProductCategory.STATIONERY),
    ("Gift Card", 50.0, ProductCategory.OTHER),
]


class Command(BaseCommand):
    help = "Seed the catalogue with sample products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every existing product before seeding.",
        )

    def handle(self, *args, **options):
        service = ProductService(repository=ProductDjangoRepository())

        if options["clear"]:
            deleted = service.delete_all_products()
            self.stdout.write(f"Deleted {deleted} existing products.")

        self.stdout.write("Creating products...")
        created = 0
        for name, price, category in SEED_PRODUCTS:
            try:
                service.create_product(
                    {"name": name, "price": price, "category": category.value}
                )
            except ProductValidationError as exc:
                self.stderr.write(f"Skipped {name!r}: {'; '.join(exc.messages)}")
                continue
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))
