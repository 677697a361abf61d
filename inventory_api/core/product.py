"""Product Entity - the single record type held by the store.

Invariants:
    - Product is immutable; updates produce a new instance with the same id
    - to_dict() emits exactly id, name, sku, quantity, description
    - from_dict() raises KeyError/TypeError/ValueError on malformed documents (caller decides)
"""

import uuid
from dataclasses import asdict, dataclass, replace
from typing import Any

from inventory_api.core.domain_types import ProductId


def new_product_id() -> ProductId:
    """Random UUID4 string."""
    return ProductId(str(uuid.uuid4()))


@dataclass(frozen=True)
class ProductCandidate:
    """User-supplied mutable fields, before or after normalization."""
    name: str
    sku: str
    quantity: Any
    description: str


@dataclass(frozen=True)
class Product:
    """A stored product record."""
    id: ProductId
    name: str
    sku: str
    quantity: int
    description: str

    @classmethod
    def from_candidate(
        cls, product_id: ProductId, candidate: ProductCandidate,
    ) -> "Product":
        return cls(
            id=product_id,
            name=candidate.name,
            sku=candidate.sku,
            quantity=int(candidate.quantity),
            description=candidate.description,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        """Rebuild a Product from its persisted form."""
        quantity = data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError(f"quantity must be an integer, got {quantity!r}")
        return cls(
            id=ProductId(str(data["id"])),
            name=str(data["name"]),
            sku=str(data["sku"]),
            quantity=quantity,
            description=str(data["description"]),
        )

    def with_fields(self, candidate: ProductCandidate) -> "Product":
        """Overwrite every mutable field, keeping id."""
        return replace(
            self,
            name=candidate.name,
            sku=candidate.sku,
            quantity=int(candidate.quantity),
            description=candidate.description,
        )

    def to_dict(self) -> dict:
        return asdict(self)
