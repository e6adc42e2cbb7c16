"""Product model: the single catalogue entity.

Business rules implemented:
- ``name`` is required, trimmed, 3 to 100 characters long.
- ``price`` is required and cannot be negative.
- ``category`` must be one of ``ProductCategory``.

Validators carry the same messages as the DTOs so ``full_clean()`` (run by
the repository before every write) reports errors in the API's wording.
"""

from __future__ import annotations

from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.products.constants import (
    CATEGORY_INVALID,
    CATEGORY_REQUIRED,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NAME_REQUIRED,
    NAME_TOO_LONG,
    NAME_TOO_SHORT,
    PRICE_MIN,
    PRICE_NEGATIVE,
    PRICE_NOT_A_NUMBER,
    PRICE_REQUIRED,
    ProductCategory,
)


class Product(BaseModel):
    """Product aggregate root.

    ``name`` and ``category`` are stripped of surrounding whitespace on save.
    """

    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        validators=[MinLengthValidator(NAME_MIN_LENGTH)],
        error_messages={
            "blank": NAME_REQUIRED,
            "null": NAME_REQUIRED,
            "min_length": NAME_TOO_SHORT,
            "max_length": NAME_TOO_LONG,
        },
    )
    price = models.FloatField(
        validators=[MinValueValidator(PRICE_MIN)],
        error_messages={
            "null": PRICE_REQUIRED,
            "invalid": PRICE_NOT_A_NUMBER,
            "min_value": PRICE_NEGATIVE,
        },
    )
    category = models.CharField(
        max_length=32,
        choices=ProductCategory.choices,
        error_messages={
            "blank": CATEGORY_REQUIRED,
            "null": CATEGORY_REQUIRED,
            "invalid_choice": CATEGORY_INVALID.replace("{value}", "%(value)s"),
        },
    )

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
            models.Index(fields=["category"], name="products_category_idx"),
            models.Index(fields=["price"], name="products_price_idx"),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean_fields(self, exclude=None) -> None:
        self.normalize()
        super().clean_fields(exclude=exclude)

    def normalize(self) -> None:
        """Strip surrounding whitespace from the text fields."""
        if isinstance(self.name, str):
            self.name = self.name.strip()
        if isinstance(self.category, str):
            self.category = self.category.strip()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        self.normalize()
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @property
    def summary(self) -> str:
        price = self.price
        # Whole numbers print without a fractional part
        if isinstance(price, float) and price.is_integer() and abs(price) < 1e21:
            price = int(price)
        return f"{self.name} - ${price} ({self.category})"

    def __str__(self) -> str:
        return self.summary
