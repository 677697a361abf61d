"""Health & Readiness Probes - liveness and readiness endpoints.

Invariants:
    - GET /api/health always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if the record store is unreachable (readiness)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from inventory_api.api.dependencies import get_product_store
from inventory_api.core.repository_protocols import ProductStore

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "inventory-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: ProductStore = Depends(get_product_store)):
    """Readiness probe: the store can be read."""
    if not await store.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
