"""Inventory API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InventoryError to structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The record store is built once in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Static UI mounted after API routes so /api/* takes precedence
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from inventory_api.api.error_handlers import register_error_handlers
from inventory_api.api.routes import health, products
from inventory_api.config import get_settings
from inventory_api.infrastructure.observability import setup_logging
from inventory_api.infrastructure.store_factory import (
    build_product_store, close_product_store,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.product_store = await build_product_store(settings)
    logger.info("Inventory API started")
    yield
    await close_product_store(app.state.product_store)
    logger.info("Inventory API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Inventory API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(products.router)
    register_error_handlers(app)

    # html=True serves index.html for unknown routes (SPA fallback)
    if settings.static_dir.is_dir():
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )
    return app


app = create_app()
