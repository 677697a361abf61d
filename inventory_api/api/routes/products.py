"""Products - CRUD endpoints over the record store.

Invariants:
    - Handlers only translate between HTTP and the product_catalog service
    - Status codes: list/get/update/delete 200, create 201, errors via global handlers
"""

from fastapi import APIRouter, Depends, status

from inventory_api.api.dependencies import get_product_store
from inventory_api.core.domain_types import ProductId
from inventory_api.core.repository_protocols import ProductStore
from inventory_api.schemas.product import MessageOut, ProductIn, ProductOut
from inventory_api.services import product_catalog

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[ProductOut])
async def list_products(store: ProductStore = Depends(get_product_store)):
    """Return every product."""
    products = await product_catalog.list_products(store)
    return [ProductOut.from_domain(p) for p in products]


@router.get("/{product_id}", response_model=ProductOut)
async def get_product(
    product_id: str, store: ProductStore = Depends(get_product_store),
):
    product = await product_catalog.get_product(store, ProductId(product_id))
    return ProductOut.from_domain(product)


@router.post(
    "", response_model=ProductOut, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductIn, store: ProductStore = Depends(get_product_store),
):
    """Validate, assign an id, persist."""
    product = await product_catalog.create_product(store, body.to_candidate())
    return ProductOut.from_domain(product)


@router.put("/{product_id}", response_model=ProductOut)
async def update_product(
    product_id: str,
    body: ProductIn,
    store: ProductStore = Depends(get_product_store),
):
    """Overwrite every mutable field of an existing product."""
    product = await product_catalog.update_product(
        store, ProductId(product_id), body.to_candidate(),
    )
    return ProductOut.from_domain(product)


@router.delete("/{product_id}", response_model=MessageOut)
async def delete_product(
    product_id: str, store: ProductStore = Depends(get_product_store),
):
    await product_catalog.delete_product(store, ProductId(product_id))
    return MessageOut(message="Product deleted successfully")
