"""Product ORM - the products table used by the database-backed store.

Invariants:
    - id is the UUID4 string assigned by the store (no server default)
    - All five columns are non-nullable: a row is a complete Product or absent
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory_api.core.domain_types import ProductId
from inventory_api.core.product import Product
from inventory_api.db.base import Base


class ProductRecord(Base):
    """Persisted Product row."""
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    sku: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def to_domain(self) -> Product:
        return Product(
            id=ProductId(self.id),
            name=self.name,
            sku=self.sku,
            quantity=self.quantity,
            description=self.description,
        )
