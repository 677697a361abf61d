"""Store fixtures - every contract test runs against both record-store backends.

Invariants:
    - Each test gets a fresh JSON file or a fresh file-backed SQLite database under tmp_path

Design Decisions:
    - File-backed SQLite over :memory:: every session sees the same database
"""

import pytest

from inventory_api.infrastructure.database import DatabaseSessionManager
from inventory_api.infrastructure.json_file_store import JSONFileProductStore
from inventory_api.infrastructure.sql_store import SQLProductStore


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "db.json"


@pytest.fixture
def json_store(data_file):
    return JSONFileProductStore(data_file)


@pytest.fixture(params=["json", "database"])
async def store(request, tmp_path):
    """The record store under test, one run per backend."""
    if request.param == "json":
        yield JSONFileProductStore(tmp_path / "data" / "db.json")
        return

    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await manager.create_schema()
    sql_store = SQLProductStore(manager)
    yield sql_store
    await sql_store.close()
