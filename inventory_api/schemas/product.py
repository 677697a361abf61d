"""Product Schemas - request/response shapes for the products API.

Invariants:
    - ProductIn only checks JSON shape; business rules live in core/validate_product
    - Missing text fields default to "" and missing quantity to 0, so they surface
      as field errors rather than schema errors
    - Any id sent in a request body is ignored (ids are assigned by the store)

Design Decisions:
    - Strict scalar union for quantity: bools and objects rejected here, numeric
      strings and integral floats left for validate_candidate to coerce
"""

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr

from inventory_api.core.product import Product, ProductCandidate


class ProductIn(BaseModel):
    """Candidate fields submitted by the UI."""
    name: str = ""
    sku: str = ""
    quantity: StrictInt | StrictFloat | StrictStr = 0
    description: str = ""

    def to_candidate(self) -> ProductCandidate:
        return ProductCandidate(
            name=self.name,
            sku=self.sku,
            quantity=self.quantity,
            description=self.description,
        )


class ProductOut(BaseModel):
    """Stored product as returned to clients."""
    id: str
    name: str
    sku: str
    quantity: int
    description: str

    @classmethod
    def from_domain(cls, product: Product) -> "ProductOut":
        return cls(**product.to_dict())


class MessageOut(BaseModel):
    message: str
