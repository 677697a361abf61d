"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps the string form of a UUID4, never a counter
    - Every mutable Product field is named by ProductField, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ProductField(str, Enum):
    """Mutable Product fields, in form order."""
    NAME = "name"
    SKU = "sku"
    QUANTITY = "quantity"
    DESCRIPTION = "description"


class StorageBackend(str, Enum):
    """Record store implementations selectable from settings."""
    JSON = "json"
    DATABASE = "database"


class CorruptStoragePolicy(str, Enum):
    """What the JSON store does with a present but unreadable document."""
    RESET = "reset"
    ERROR = "error"
