"""Store Factory - builds the one ProductStore the process uses.

Invariants:
    - Called once from the FastAPI lifespan; the result lives on app.state
    - No module-level store singleton
"""

import logging

from inventory_api.config import Settings
from inventory_api.core.domain_types import StorageBackend
from inventory_api.core.repository_protocols import ProductStore
from inventory_api.infrastructure.database import (
    DatabaseSessionManager, engine_options,
)
from inventory_api.infrastructure.json_file_store import JSONFileProductStore
from inventory_api.infrastructure.sql_store import SQLProductStore

logger = logging.getLogger(__name__)


async def build_product_store(settings: Settings) -> ProductStore:
    """Construct the configured store, creating tables for the database backend."""
    if settings.storage_backend == StorageBackend.DATABASE:
        manager = DatabaseSessionManager(
            settings.database_url,
            **engine_options(
                settings.database_url,
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
            ),
        )
        await manager.create_schema()
        logger.info("Using database product store", extra={"backend": "database"})
        return SQLProductStore(manager)

    logger.info(
        f"Using JSON product store at {settings.data_file}",
        extra={"backend": "json"},
    )
    return JSONFileProductStore(
        settings.data_file, corrupt_policy=settings.corrupt_storage_policy,
    )


async def close_product_store(store: ProductStore) -> None:
    close = getattr(store, "close", None)
    if close is not None:
        await close()
