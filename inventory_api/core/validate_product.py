"""Product Validation - pure admission rules applied before a candidate reaches the store.

Invariants:
    - validate_candidate is PURE: no IO, no store access, no mutation of its input
    - Every failing field is reported; no short-circuit on the first failure
    - On success the returned candidate has sku uppercased and quantity as int
    - Accepted quantities fit a signed 64-bit integer, so every backend can store them
    - name and description are kept exactly as submitted (only checked after strip)

Design Decisions:
    - Returns a result object instead of raising: invalid input is a routine outcome,
      the service layer decides whether to turn it into ProductValidationError
    - The sku must match the character class end to end (fullmatch), so a
      trailing newline is rejected like any other foreign character
"""

import re
from dataclasses import dataclass, field, replace
from typing import Any

from inventory_api.core.domain_types import ProductField
from inventory_api.core.product import ProductCandidate


SKU_PATTERN = re.compile(r"[A-Z0-9-]+")
MAX_QUANTITY = 2**63 - 1

NAME_REQUIRED = "Product name is required"
SKU_REQUIRED = "SKU is required"
SKU_INVALID = "SKU should contain only letters, numbers, and hyphens"
QUANTITY_NEGATIVE = "Quantity cannot be negative"
QUANTITY_NOT_INTEGER = "Quantity must be a whole number"
QUANTITY_TOO_LARGE = "Quantity is too large"
DESCRIPTION_REQUIRED = "Description is required"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_candidate."""
    valid: bool
    field_errors: dict[str, str] = field(default_factory=dict)
    candidate: ProductCandidate | None = None


def normalize_sku(sku: str) -> str:
    return sku.upper()


def _whole_float(value: float) -> int | None:
    # nan and inf are never integral
    return int(value) if value.is_integer() else None


def coerce_quantity(value: Any) -> int | None:
    """Coerce to int, or None when the value is not a whole number.

    Numbers and numeric strings follow the same rule: 5, 5.0, "5" and "5.0"
    all become 5, while 5.5 and "5.5" are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _whole_float(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return _whole_float(float(text))
        except ValueError:
            return None
    return None


def validate_candidate(candidate: ProductCandidate) -> ValidationResult:
    """Check every field and normalize on success."""
    errors: dict[str, str] = {}

    if not candidate.name.strip():
        errors[ProductField.NAME.value] = NAME_REQUIRED

    sku = normalize_sku(candidate.sku)
    if not sku.strip():
        errors[ProductField.SKU.value] = SKU_REQUIRED
    elif not SKU_PATTERN.fullmatch(sku):
        errors[ProductField.SKU.value] = SKU_INVALID

    quantity = coerce_quantity(candidate.quantity)
    if quantity is None:
        errors[ProductField.QUANTITY.value] = QUANTITY_NOT_INTEGER
    elif quantity < 0:
        errors[ProductField.QUANTITY.value] = QUANTITY_NEGATIVE
    elif quantity > MAX_QUANTITY:
        errors[ProductField.QUANTITY.value] = QUANTITY_TOO_LARGE

    if not candidate.description.strip():
        errors[ProductField.DESCRIPTION.value] = DESCRIPTION_REQUIRED

    if errors:
        return ValidationResult(valid=False, field_errors=errors)

    return ValidationResult(
        valid=True,
        candidate=replace(candidate, sku=sku, quantity=quantity),
    )
