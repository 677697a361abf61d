"""Root conftest - shared test configuration."""

import os

import pytest

from inventory_api.core.product import ProductCandidate

# Keep tests away from the real data/db.json and any local .env
os.environ.setdefault("STORAGE_BACKEND", "json")
os.environ.setdefault("DATA_FILE", "test-data/db.json")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def mouse():
    """A valid, already-normalized candidate."""
    return ProductCandidate(
        name="Mouse", sku="ABC-1", quantity=5, description="Wireless mouse",
    )


@pytest.fixture
def keyboard():
    return ProductCandidate(
        name="Keyboard", sku="KB-200", quantity=12, description="Mechanical keyboard",
    )
