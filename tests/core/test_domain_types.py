"""Domain Types - verifies identity wrapper and enum values.

Tests:
    - ProductId wraps str
    - ProductField lists exactly the mutable fields
    - Settings-facing enums accept their string forms
"""

from inventory_api.core.domain_types import (
    CorruptStoragePolicy, ProductField, ProductId, StorageBackend,
)


def test_product_id_wraps_str():
    pid = ProductId("abc")
    assert pid == "abc"
    assert isinstance(pid, str)


def test_product_field_has_four_mutable_fields():
    assert [f.value for f in ProductField] == [
        "name", "sku", "quantity", "description",
    ]


def test_storage_enums_parse_from_strings():
    assert StorageBackend("json") is StorageBackend.JSON
    assert StorageBackend("database") is StorageBackend.DATABASE
    assert CorruptStoragePolicy("reset") is CorruptStoragePolicy.RESET
    assert CorruptStoragePolicy("error") is CorruptStoragePolicy.ERROR
