"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the Service
layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation (all fields required).
- ``UpdateProductDTO``: input for partial product updates.

Pydantic validates every field before reporting, so ``from_payload``
surfaces all violated constraints at once as a ``ProductValidationError``.
"""

from __future__ import annotations

import math
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from modules.products.constants import (
    CATEGORY_INVALID,
    CATEGORY_REQUIRED,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NAME_NOT_A_STRING,
    NAME_REQUIRED,
    NAME_TOO_LONG,
    NAME_TOO_SHORT,
    PRICE_MIN,
    PRICE_NEGATIVE,
    PRICE_NOT_A_NUMBER,
    REQUIRED_FIELDS,
    REQUIRED_MESSAGES,
    ProductCategory,
)
from modules.products.exceptions import (
    FieldLengthError,
    FieldRangeError,
    InvalidEnumError,
    MissingFieldError,
    MissingProductFields,
    ProductFieldError,
    ProductValidationError,
)

# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------


def clean_name(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        raise FieldLengthError("name", NAME_NOT_A_STRING)
    value = value.strip()
    if not value:
        raise MissingFieldError("name", NAME_REQUIRED)
    if len(value) < NAME_MIN_LENGTH:
        raise FieldLengthError("name", NAME_TOO_SHORT)
    if len(value) > NAME_MAX_LENGTH:
        raise FieldLengthError("name", NAME_TOO_LONG)
    return value


def clean_price(value: Any) -> float:
    if isinstance(value, bool):
        raise FieldRangeError("price", PRICE_NOT_A_NUMBER)
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise FieldRangeError("price", PRICE_NOT_A_NUMBER) from None
    if not isinstance(value, (int, float)):
        raise FieldRangeError("price", PRICE_NOT_A_NUMBER)
    try:
        value = float(value)
    except OverflowError:
        raise FieldRangeError("price", PRICE_NOT_A_NUMBER) from None
    if not math.isfinite(value):
        raise FieldRangeError("price", PRICE_NOT_A_NUMBER)
    if value < PRICE_MIN:
        raise FieldRangeError("price", PRICE_NEGATIVE)
    return value


def clean_category(value: Any) -> str:
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise MissingFieldError("category", CATEGORY_REQUIRED)
    if value not in ProductCategory.values:
        raise InvalidEnumError("category", CATEGORY_INVALID.format(value=value))
    return value


def _field_errors(exc: PydanticValidationError) -> List[ProductFieldError]:
    errors: List[ProductFieldError] = []
    for detail in exc.errors():
        original = (detail.get("ctx") or {}).get("error")
        if isinstance(original, ProductFieldError):
            errors.append(original)
            continue
        field = str(detail["loc"][0]) if detail["loc"] else "body"
        errors.append(ProductFieldError(field, f"{field}: {detail['msg']}"))
    return errors


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: float
    category: str

    @field_validator("name", mode="before")
    @classmethod
    def name_within_bounds(cls, v: Any) -> str:
        return clean_name(v)

    @field_validator("price", mode="before")
    @classmethod
    def price_not_negative(cls, v: Any) -> float:
        return clean_price(v)

    @field_validator("category", mode="before")
    @classmethod
    def category_is_known(cls, v: Any) -> str:
        return clean_category(v)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> CreateProductDTO:
        """Build the DTO from a request body.

        Raises:
            MissingProductFields: name, price or category absent or empty.
            ProductValidationError: any present field is invalid.
        """
        missing = [field for field in REQUIRED_FIELDS if not data.get(field)]
        if missing:
            raise MissingProductFields(
                MissingFieldError(field, REQUIRED_MESSAGES[field]) for field in missing
            )
        try:
            return cls(**{field: data[field] for field in REQUIRED_FIELDS})
        except PydanticValidationError as exc:
            raise ProductValidationError(_field_errors(exc)) from exc


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields will be updated.
    ``None`` means "not supplied".
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def name_within_bounds(cls, v: Any) -> Optional[str]:
        return None if v is None else clean_name(v)

    @field_validator("price", mode="before")
    @classmethod
    def price_not_negative(cls, v: Any) -> Optional[float]:
        return None if v is None else clean_price(v)

    @field_validator("category", mode="before")
    @classmethod
    def category_is_known(cls, v: Any) -> Optional[str]:
        return None if v is None else clean_category(v)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> UpdateProductDTO:
        """Build the DTO from a request body, ignoring unknown keys.

        Raises:
            ProductValidationError: any supplied field is invalid.
        """
        try:
            return cls(**{f: data[f] for f in REQUIRED_FIELDS if f in data})
        except PydanticValidationError as exc:
            raise ProductValidationError(_field_errors(exc)) from exc

    def changes(self) -> dict[str, Any]:
        """The supplied fields, ready to be applied to a product."""
        return self.model_dump(exclude_none=True)
