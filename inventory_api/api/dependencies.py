"""Route Dependencies - hands the process-wide store to request handlers.

Invariants:
    - The store is built once in the lifespan and stored on app.state.product_store
    - Tests override get_product_store instead of touching app.state
"""

from fastapi import Request

from inventory_api.core.repository_protocols import ProductStore


def get_product_store(request: Request) -> ProductStore:
    """FastAPI dependency for the record store."""
    store = getattr(request.app.state, "product_store", None)
    if store is None:
        raise RuntimeError("Product store not initialized")
    return store
