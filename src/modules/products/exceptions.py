"""Product domain exceptions.

Raised by the DTOs, the repository and the Service Layer when a rule is
violated.  The API layer (Views) catches these and translates them into
the response envelope; it never inspects error names or message text.

Field-level variants (``ProductFieldError`` subclasses) are collected into
a single ``ProductValidationError`` so every violated constraint is
reported at once.
"""

from __future__ import annotations

from typing import Iterable, List


class ProductFieldError(ValueError):
    """A single product field violates its constraint."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class MissingFieldError(ProductFieldError):
    """A required field (create only) is absent or empty."""


class FieldLengthError(ProductFieldError):
    """A text field is shorter or longer than allowed."""


class FieldRangeError(ProductFieldError):
    """A numeric field is out of range or not a number."""


class InvalidEnumError(ProductFieldError):
    """A value is not one of the allowed choices."""


class ProductValidationError(Exception):
    """One or more product fields are invalid."""

    def __init__(self, errors: Iterable[ProductFieldError]) -> None:
        self.errors: List[ProductFieldError] = list(errors)
        super().__init__("; ".join(self.messages))

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]


class MissingProductFields(ProductValidationError):
    """Create was called without one of name, price or category."""


class ProductNotFound(Exception):
    """The requested product does not exist."""

    def __init__(self, product_id: str, message: str | None = None) -> None:
        self.product_id = product_id
        super().__init__(message or f"Product not found with ID: {product_id}")


class InvalidProductId(ProductNotFound):
    """The identifier is malformed, so no product can carry it."""

    def __init__(self, product_id: str) -> None:
        super().__init__(product_id, f"Invalid product ID: {product_id}")
