"""JSON File Store - persistence format, failure policy, and concurrency limits.

Tests cover:
    - document layout on disk and reload by a fresh store object
    - missing file -> empty; corrupt file -> empty (reset) or CorruptStorageError (error)
    - unreadable/unwritable paths -> StorageFaultError
    - concurrent creates through ONE store all persist (in-process lock)
    - two stores on ONE file can lose an update (documented read-modify-write race)
"""

import asyncio
import json
import os

import pytest

from inventory_api.core.domain_types import CorruptStoragePolicy
from inventory_api.core.errors import CorruptStorageError, StorageFaultError
from inventory_api.core.product import Product, ProductCandidate
from inventory_api.infrastructure.json_file_store import (
    JSONFileProductStore, parse_document, render_document,
)


# ─── Document format ─────────────────────────────────────────────

async def test_writes_products_document(json_store, data_file, mouse):
    created = await json_store.create(mouse)

    document = json.loads(data_file.read_text(encoding="utf-8"))
    assert document == {"products": [created.to_dict()]}
    assert isinstance(document["products"][0]["id"], str)


async def test_fresh_store_object_reads_persisted_records(json_store, data_file, mouse):
    created = await json_store.create(mouse)

    reopened = JSONFileProductStore(data_file)
    assert await reopened.list_all() == [created]


async def test_reads_every_operation_fresh_from_disk(json_store, data_file, mouse):
    created = await json_store.create(mouse)
    data_file.write_text(json.dumps({"products": []}), encoding="utf-8")

    assert await json_store.get_by_id(created.id) is None
    assert await json_store.list_all() == []


async def test_delete_of_unknown_id_does_not_write(json_store, data_file):
    assert await json_store.delete("nope") is False
    assert not data_file.exists()


async def test_no_temp_files_left_behind(json_store, data_file, mouse, keyboard):
    await json_store.create(mouse)
    await json_store.create(keyboard)
    assert [p.name for p in data_file.parent.iterdir()] == ["db.json"]


def test_render_then_parse_preserves_products():
    products = [
        Product(id="a", name="Mouse", sku="ABC-1", quantity=5, description="x"),
        Product(id="b", name="Pad", sku="P-2", quantity=0, description="y"),
    ]
    assert parse_document(render_document(products)) == products


def test_parse_rejects_duplicate_ids():
    raw = json.dumps({"products": [
        {"id": "a", "name": "n", "sku": "S", "quantity": 1, "description": "d"},
        {"id": "a", "name": "m", "sku": "T", "quantity": 2, "description": "e"},
    ]})
    with pytest.raises(ValueError):
        parse_document(raw)


# ─── Missing and corrupt storage ─────────────────────────────────

async def test_missing_file_is_empty_collection(json_store, data_file):
    assert not data_file.exists()
    assert await json_store.list_all() == []


CORRUPT_DOCUMENTS = [
    "",
    "{not json",
    "[]",
    '{"items": []}',
    '{"products": {}}',
    '{"products": [{"id": "a"}]}',
]


@pytest.mark.parametrize("raw", CORRUPT_DOCUMENTS)
async def test_corrupt_file_reads_as_empty_under_reset_policy(data_file, raw):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(raw, encoding="utf-8")
    store = JSONFileProductStore(data_file, CorruptStoragePolicy.RESET)

    assert await store.list_all() == []
    assert await store.health_check() is True


async def test_reset_policy_overwrites_corrupt_file_on_next_write(data_file, mouse):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("{not json", encoding="utf-8")
    store = JSONFileProductStore(data_file, CorruptStoragePolicy.RESET)

    created = await store.create(mouse)

    assert json.loads(data_file.read_text(encoding="utf-8")) == {
        "products": [created.to_dict()],
    }


@pytest.mark.parametrize("raw", CORRUPT_DOCUMENTS)
async def test_corrupt_file_raises_under_error_policy(data_file, raw, mouse):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(raw, encoding="utf-8")
    store = JSONFileProductStore(data_file, CorruptStoragePolicy.ERROR)

    with pytest.raises(CorruptStorageError):
        await store.list_all()
    with pytest.raises(CorruptStorageError):
        await store.create(mouse)
    assert data_file.read_text(encoding="utf-8") == raw
    assert await store.health_check() is False


async def test_missing_file_is_empty_even_under_error_policy(data_file):
    store = JSONFileProductStore(data_file, CorruptStoragePolicy.ERROR)
    assert await store.list_all() == []


# ─── IO faults ───────────────────────────────────────────────────

async def test_unreadable_path_raises_storage_fault(tmp_path):
    directory = tmp_path / "db.json"
    directory.mkdir()
    store = JSONFileProductStore(directory)

    with pytest.raises(StorageFaultError) as exc_info:
        await store.list_all()
    assert exc_info.value.operation == "read"
    assert await store.health_check() is False


async def test_path_under_a_file_raises_storage_fault(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    store = JSONFileProductStore(blocker / "db.json")

    with pytest.raises(StorageFaultError):
        await store.list_all()


async def test_failed_write_raises_storage_fault_and_cleans_up(
    json_store, data_file, mouse, monkeypatch,
):
    def refuse(src, dst):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(os, "replace", refuse)

    with pytest.raises(StorageFaultError) as exc_info:
        await json_store.create(mouse)
    assert exc_info.value.operation == "write"
    assert list(data_file.parent.iterdir()) == []


# ─── Concurrency ─────────────────────────────────────────────────

async def test_concurrent_creates_through_one_store_all_persist(json_store):
    candidates = [
        ProductCandidate(name=f"P{i}", sku=f"SKU-{i}", quantity=i, description="x")
        for i in range(20)
    ]

    created = await asyncio.gather(*(json_store.create(c) for c in candidates))

    stored = await json_store.list_all()
    assert len(stored) == 20
    assert {p.id for p in stored} == {p.id for p in created}


async def test_two_stores_on_one_file_can_lose_an_update(data_file, keyboard):
    """Read-modify-write across store objects is not serialized: last write wins."""
    first = JSONFileProductStore(data_file)
    second = JSONFileProductStore(data_file)

    stale_snapshot = await first._load()
    await second.create(keyboard)
    lost_writer_view = stale_snapshot + [
        Product(id="from-first", name="Mouse", sku="ABC-1", quantity=5, description="x"),
    ]
    await first._save(lost_writer_view)

    stored = await second.list_all()
    assert [p.id for p in stored] == ["from-first"]
