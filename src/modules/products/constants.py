"""Product domain constants.

Field limits and the user-facing validation messages.  The pydantic DTOs
and the Django model share them so both layers report identical errors.
"""

from django.db import models


class ProductCategory(models.TextChoices):
    ELECTRONICS = "Electronics", "Electronics"
    CLOTHING = "Clothing", "Clothing"
    FOOD = "Food", "Food"
    BOOKS = "Books", "Books"
    TOYS = "Toys", "Toys"
    ACCESSORIES = "Accessories", "Accessories"
    STATIONERY = "Stationery", "Stationery"
    OTHER = "Other", "Other"


NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
PRICE_MIN = 0

REQUIRED_FIELDS = ("name", "price", "category")

NAME_REQUIRED = "Product name is required"
NAME_TOO_SHORT = f"Product name must be at least {NAME_MIN_LENGTH} characters long"
NAME_TOO_LONG = f"Product name cannot exceed {NAME_MAX_LENGTH} characters"
NAME_NOT_A_STRING = "Product name must be a string"
PRICE_REQUIRED = "Product price is required"
PRICE_NEGATIVE = "Price cannot be negative"
PRICE_NOT_A_NUMBER = "Product price must be a number"
CATEGORY_REQUIRED = "Product category is required"
CATEGORY_INVALID = "{value} is not a valid category"

REQUIRED_MESSAGES = {
    "name": NAME_REQUIRED,
    "price": PRICE_REQUIRED,
    "category": CATEGORY_REQUIRED,
}

MISSING_FIELDS_MESSAGE = (
    "Please provide all required fields: name, price, and category"
)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_ORDERING = ("-created_at",)

# Keeps the skip (page - 1) * limit within a signed 64-bit SQL integer
MAX_PAGE_PARAM = 2**31 - 1

# Model fields and the public (camelCase) sort keys that order by them
SORT_FIELDS = (
    ("id", "id"),
    ("name", "name"),
    ("price", "price"),
    ("category", "category"),
    ("created_at", "createdAt"),
    ("updated_at", "updatedAt"),
)
