"""JSON File Store - the product collection persisted as a single JSON document.

Invariants:
    - Document shape is {"products": [Product, ...]}, ids stored as strings
    - The whole collection is loaded before every operation and rewritten after
      every mutation (full read-then-overwrite, never a partial record write)
    - Missing file -> empty collection
    - Present but malformed file -> empty collection (RESET) or CorruptStorageError (ERROR)
    - Any other OSError -> StorageFaultError
    - Writes land in a temp sibling and are swapped in with os.replace

Design Decisions:
    - asyncio.Lock around read-modify-write: serializes mutations within one process.
      Two processes (or two store objects) on the same file still race; last write wins
    - File IO runs in a worker thread so the event loop never blocks on disk
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from inventory_api.core.domain_types import CorruptStoragePolicy, ProductId
from inventory_api.core.errors import CorruptStorageError, StorageFaultError
from inventory_api.core.product import Product, ProductCandidate, new_product_id

logger = logging.getLogger(__name__)


def parse_document(raw: str) -> list[Product]:
    """Parse a persisted document. Raises ValueError/KeyError/TypeError if malformed."""
    data = json.loads(raw)
    if not isinstance(data, dict) or not isinstance(data.get("products"), list):
        raise ValueError("document must be an object with a 'products' list")
    products = [Product.from_dict(item) for item in data["products"]]
    ids = {p.id for p in products}
    if len(ids) != len(products):
        raise ValueError("duplicate product ids")
    return products


def render_document(products: list[Product]) -> str:
    return json.dumps(
        {"products": [p.to_dict() for p in products]},
        indent=2, ensure_ascii=False,
    )


class JSONFileProductStore:
    """ProductStore backed by one JSON file."""

    def __init__(
        self,
        path: Path | str,
        corrupt_policy: CorruptStoragePolicy = CorruptStoragePolicy.RESET,
    ):
        self.path = Path(path)
        self.corrupt_policy = corrupt_policy
        self._lock = asyncio.Lock()

    # ─── ProductStore ────────────────────────────────────────────

    async def list_all(self) -> list[Product]:
        return await self._load()

    async def get_by_id(self, product_id: ProductId) -> Product | None:
        products = await self._load()
        return next((p for p in products if p.id == product_id), None)

    async def create(self, candidate: ProductCandidate) -> Product:
        async with self._lock:
            products = await self._load()
            product = Product.from_candidate(new_product_id(), candidate)
            products.append(product)
            await self._save(products)
        return product

    async def update(
        self, product_id: ProductId, candidate: ProductCandidate,
    ) -> Product | None:
        async with self._lock:
            products = await self._load()
            for index, existing in enumerate(products):
                if existing.id == product_id:
                    updated = existing.with_fields(candidate)
                    products[index] = updated
                    await self._save(products)
                    return updated
        return None

    async def delete(self, product_id: ProductId) -> bool:
        async with self._lock:
            products = await self._load()
            remaining = [p for p in products if p.id != product_id]
            if len(remaining) == len(products):
                return False
            await self._save(remaining)
        return True

    async def health_check(self) -> bool:
        try:
            await self._load()
            return True
        except StorageFaultError as e:
            logger.error(f"JSON store health check failed: {e}")
            return False

    # ─── File IO ─────────────────────────────────────────────────

    async def _load(self) -> list[Product]:
        return await asyncio.to_thread(self._read_sync)

    async def _save(self, products: list[Product]) -> None:
        await asyncio.to_thread(self._write_sync, products)

    def _read_sync(self) -> list[Product]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(
                f"Cannot read product file: {e}",
                extra={"path": str(self.path), "operation": "read"},
            )
            raise StorageFaultError("product file is not readable", "read") from e

        try:
            return parse_document(raw.decode("utf-8"))
        except (ValueError, KeyError, TypeError) as e:
            if self.corrupt_policy == CorruptStoragePolicy.ERROR:
                logger.error(
                    f"Product file is corrupt: {e}",
                    extra={"path": str(self.path), "operation": "read"},
                )
                raise CorruptStorageError("product file is corrupt") from e
            logger.warning(
                f"Product file is corrupt, starting from an empty collection: {e}",
                extra={"path": str(self.path), "operation": "read"},
            )
            return []

    def _write_sync(self, products: list[Product]) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(render_document(products))
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error(
                f"Cannot write product file: {e}",
                extra={"path": str(self.path), "operation": "write"},
            )
            raise StorageFaultError("product file is not writable", "write") from e
