"""Service test fixtures - JSON-backed store + FastAPI test client.

Invariants:
    - Every test gets a fresh JSON file under tmp_path
    - get_product_store dependency overridden to use that store
    - Lifespan is not run by ASGITransport, so the real data file is never touched
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inventory_api.api.dependencies import get_product_store
from inventory_api.infrastructure.json_file_store import JSONFileProductStore
from inventory_api.main import app


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def product_store(data_file):
    return JSONFileProductStore(data_file)


@pytest.fixture
async def client(product_store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_product_store] = lambda: product_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def failing_store():
    """A store whose every operation hits a storage fault."""
    from inventory_api.core.errors import StorageFaultError

    class _FailingStore:
        async def list_all(self):
            raise StorageFaultError("disk unavailable", "read")

        async def get_by_id(self, product_id):
            raise StorageFaultError("disk unavailable", "read")

        async def create(self, candidate):
            raise StorageFaultError("disk unavailable", "write")

        async def update(self, product_id, candidate):
            raise StorageFaultError("disk unavailable", "write")

        async def delete(self, product_id):
            raise StorageFaultError("disk unavailable", "write")

        async def health_check(self):
            return False

    return _FailingStore()


@pytest.fixture
async def failing_client(failing_store):
    app.dependency_overrides[get_product_store] = lambda: failing_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def broken_client():
    """Client over a store with a programming error; app exceptions become responses."""

    class _BrokenStore:
        async def list_all(self):
            raise RuntimeError("store wiring bug at /srv/secret/path")

    app.dependency_overrides[get_product_store] = lambda: _BrokenStore()

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
