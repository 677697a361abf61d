"""SQL Store - the record-store contract over SQLAlchemy async sessions.

Invariants:
    - Same semantics as JSONFileProductStore: None/False for absent ids, uuid4 ids
    - Every mutation commits before returning; failures roll back via the session manager
"""

from sqlalchemy import select

from inventory_api.core.domain_types import ProductId
from inventory_api.core.product import Product, ProductCandidate, new_product_id
from inventory_api.infrastructure.database import DatabaseSessionManager
from inventory_api.models.product import ProductRecord


class SQLProductStore:
    """ProductStore backed by the products table."""

    def __init__(self, manager: DatabaseSessionManager):
        self.manager = manager

    async def list_all(self) -> list[Product]:
        async with self.manager.session() as db:
            result = await db.execute(select(ProductRecord))
            return [record.to_domain() for record in result.scalars().all()]

    async def get_by_id(self, product_id: ProductId) -> Product | None:
        async with self.manager.session() as db:
            record = await db.get(ProductRecord, product_id)
            return record.to_domain() if record else None

    async def create(self, candidate: ProductCandidate) -> Product:
        product = Product.from_candidate(new_product_id(), candidate)
        async with self.manager.session() as db:
            db.add(ProductRecord(**product.to_dict()))
            await db.commit()
        return product

    async def update(
        self, product_id: ProductId, candidate: ProductCandidate,
    ) -> Product | None:
        async with self.manager.session() as db:
            record = await db.get(ProductRecord, product_id)
            if record is None:
                return None
            record.name = candidate.name
            record.sku = candidate.sku
            record.quantity = int(candidate.quantity)
            record.description = candidate.description
            await db.commit()
            return record.to_domain()

    async def delete(self, product_id: ProductId) -> bool:
        async with self.manager.session() as db:
            record = await db.get(ProductRecord, product_id)
            if record is None:
                return False
            await db.delete(record)
            await db.commit()
            return True

    async def health_check(self) -> bool:
        return await self.manager.health_check()

    async def close(self) -> None:
        await self.manager.dispose()
