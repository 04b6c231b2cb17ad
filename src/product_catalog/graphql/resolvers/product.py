from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import ProductRecord, ProductStore

if TYPE_CHECKING:
    from ..types.product import Product

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> ProductStore:
    """Return the product store injected into the GraphQL context."""
    return info.context["store"]


def _to_graphql(record: ProductRecord | None) -> Product | None:
    if record is None:
        return None

    from ..types.product import Product as ProductType

    return ProductType.from_record(record)


# Query resolvers
async def resolve_products(info: strawberry.Info) -> list[Product]:
    """Resolve every product in store order."""
    store = get_store_from_info(info)
    return [_to_graphql(record) for record in store.list()]


async def resolve_product_by_id(info: strawberry.Info, id: str | None) -> Product | None:
    store = get_store_from_info(info)
    record = store.get_by_id(id)
    if record is None:
        logger.info("Product not found", product_id=id)
        return None
    return _to_graphql(record)


async def resolve_product_total_price(info: strawberry.Info, id: str | None) -> float | None:
    """
    Resolve price * qty for a single product.

    Returns None when the product does not exist or lacks a price or quantity.
    """
    store = get_store_from_info(info)
    total = store.total_price(id)
    if total is None:
        logger.info("Total price unavailable", product_id=id)
    return total


async def resolve_total_qty_of_products(info: strawberry.Info) -> int:
    store = get_store_from_info(info)
    return store.total_quantity()


# Mutation resolvers
async def add_product(
    info: strawberry.Info,
    product_name: str | None,
    price: float | None,
    qty: int | None,
) -> Product:
    """Create a product with a generated id."""
    store = get_store_from_info(info)
    record = store.add(product_name=product_name, price=price, qty=qty)
    logger.info("Product created", product_id=record.id, product_name=product_name)
    return _to_graphql(record)


async def update_product(
    info: strawberry.Info,
    id: str | None,
    product_name: str | None,
    price: float | None,
    qty: int | None,
) -> Product | None:
    """
    Replace an existing product with the given fields.

    Arguments left out of the mutation are stored as null. Returns None when
    no product has the given id.
    """
    store = get_store_from_info(info)
    record = store.update(id, product_name=product_name, price=price, qty=qty)
    if record is None:
        logger.info("Product not found for update", product_id=id)
        return None

    logger.info("Product updated", product_id=record.id)
    return _to_graphql(record)


async def delete_product(info: strawberry.Info, id: str | None) -> Product | None:
    """Delete a product and return it, or None if it does not exist."""
    store = get_store_from_info(info)
    record = store.delete(id)
    if record is None:
        logger.info("Product not found for deletion", product_id=id)
        return None

    logger.info("Product deleted", product_id=record.id)
    return _to_graphql(record)
