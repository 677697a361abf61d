"""Boundary Protocols - the record-store contract between core and shell.

Invariants:
    - Core NEVER imports from shell; implementations live in infrastructure/
    - get_by_id/update signal absence with None, delete with False (never raise)
    - create/update receive candidates already validated and normalized
    - Every IO fault surfaces as StorageFaultError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: implementations do IO, the service layer awaits them
"""

from typing import Protocol

from inventory_api.core.domain_types import ProductId
from inventory_api.core.product import Product, ProductCandidate


class ProductStore(Protocol):
    """Contract for product persistence, implemented by shell."""
    async def list_all(self) -> list[Product]: ...
    async def get_by_id(self, product_id: ProductId) -> Product | None: ...
    async def create(self, candidate: ProductCandidate) -> Product: ...
    async def update(
        self, product_id: ProductId, candidate: ProductCandidate,
    ) -> Product | None: ...
    async def delete(self, product_id: ProductId) -> bool: ...
    async def health_check(self) -> bool: ...
