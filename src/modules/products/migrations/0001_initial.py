import django.core.validators
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(blank=True, editable=False)),
                ("updated_at", models.DateTimeField(blank=True, editable=False)),
                (
                    "version",
                    models.PositiveIntegerField(default=0, editable=False),
                ),
                (
                    "name",
                    models.CharField(
                        error_messages={
                            "blank": "Product name is required",
                            "max_length": "Product name cannot exceed 100 characters",
                            "min_length": "Product name must be at least 3 characters long",
                            "null": "Product name is required",
                        },
                        max_length=100,
                        validators=[django.core.validators.MinLengthValidator(3)],
                    ),
                ),
                (
                    "price",
                    models.FloatField(
                        error_messages={
                            "invalid": "Product price must be a number",
                            "min_value": "Price cannot be negative",
                            "null": "Product price is required",
                        },
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Electronics", "Electronics"),
                            ("Clothing", "Clothing"),
                            ("Food", "Food"),
                            ("Books", "Books"),
                            ("Toys", "Toys"),
                            ("Accessories", "Accessories"),
                            ("Stationery", "Stationery"),
                            ("Other", "Other"),
                        ],
                        error_messages={
                            "blank": "Product category is required",
                            "invalid_choice": "%(value)s is not a valid category",
                            "null": "Product category is required",
                        },
                        max_length=32,
                    ),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["name"], name="products_name_idx"),
                    models.Index(fields=["category"], name="products_category_idx"),
                    models.Index(fields=["price"], name="products_price_idx"),
                ],
            },
        ),
    ]
