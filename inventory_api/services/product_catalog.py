"""Product Catalog - the boundary between HTTP handlers and the record store.

Invariants:
    - Candidates are validated and normalized BEFORE they reach the store
    - update validates first, then looks the id up (an invalid body for an unknown
      id is a 400, matching the request order of the HTTP API)
    - Absence reported by the store becomes ProductNotFoundError here
    - Storage faults pass through untouched (no retry)
"""

import logging

from inventory_api.core.domain_types import ProductId
from inventory_api.core.errors import ProductNotFoundError, ProductValidationError
from inventory_api.core.product import Product, ProductCandidate
from inventory_api.core.repository_protocols import ProductStore
from inventory_api.core.validate_product import validate_candidate

logger = logging.getLogger(__name__)


def admit_candidate(candidate: ProductCandidate) -> ProductCandidate:
    """Return the normalized candidate or raise ProductValidationError."""
    result = validate_candidate(candidate)
    if not result.valid:
        raise ProductValidationError(result.field_errors)
    return result.candidate


async def list_products(store: ProductStore) -> list[Product]:
    return await store.list_all()


async def get_product(store: ProductStore, product_id: ProductId) -> Product:
    product = await store.get_by_id(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


async def create_product(
    store: ProductStore, candidate: ProductCandidate,
) -> Product:
    product = await store.create(admit_candidate(candidate))
    logger.info("Product created", extra={"product_id": product.id})
    return product


async def update_product(
    store: ProductStore, product_id: ProductId, candidate: ProductCandidate,
) -> Product:
    normalized = admit_candidate(candidate)
    product = await store.update(product_id, normalized)
    if product is None:
        raise ProductNotFoundError(product_id)
    logger.info("Product updated", extra={"product_id": product_id})
    return product


async def delete_product(store: ProductStore, product_id: ProductId) -> None:
    if not await store.delete(product_id):
        raise ProductNotFoundError(product_id)
    logger.info("Product deleted", extra={"product_id": product_id})
