"""Database Session Manager - async engine and sessions with automatic rollback.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to StorageFaultError (core/errors.py)
    - Driver OverflowError (integer wider than the column) is a StorageFaultError too
    - Pool sizing applies to server databases only; SQLite uses SQLAlchemy defaults

Design Decisions:
    - One manager per SQLProductStore, built at startup by the store factory
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from inventory_api import models  # noqa: F401  (registers tables on Base.metadata)
from inventory_api.core.errors import StorageFaultError
from inventory_api.db.base import Base

logger = logging.getLogger(__name__)


def engine_options(
    database_url: str, pool_size: int = 20, max_overflow: int = 10,
) -> dict:
    """Engine kwargs for the URL. SQLite pools reject pool_size/max_overflow."""
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


class DatabaseSessionManager:
    """Manages async database sessions with rollback and health checks."""

    def __init__(self, database_url: str, **engine_kwargs):
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise StorageFaultError("integrity constraint violated", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StorageFaultError("connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StorageFaultError("database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StorageFaultError("database operation failed", "unknown") from e
        except OverflowError as e:
            await session.rollback()
            logger.error(f"DB value out of range: {e}")
            raise StorageFaultError("value out of range for column", "write") from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables. No migrations: the products table is fixed."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
