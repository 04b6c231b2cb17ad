"""
Product GraphQL type definitions
"""

import strawberry

from ...store import ProductRecord


@strawberry.type
class Product:
    """A product in the catalog."""

    id: strawberry.ID
    product_name: str | None
    price: float | None
    qty: int | None

    @classmethod
    def from_record(cls, record: ProductRecord) -> "Product":
        return cls(
            id=strawberry.ID(record.id),
            product_name=record.product_name,
            price=record.price,
            qty=record.qty,
        )
