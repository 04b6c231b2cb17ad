"""
Seed data for the in-memory product store.
"""

from __future__ import annotations

from .config import settings
from .logging import get_logger
from .store import ProductRecord, ProductStore

logger = get_logger(__name__)

SEED_PRODUCTS: tuple[ProductRecord, ...] = (
    ProductRecord(id="1", product_name="Apple", price=3.99, qty=2),
    ProductRecord(id="2", product_name="Banana", price=1.99, qty=3),
    ProductRecord(id="3", product_name="Orange", price=2.0, qty=4),
    ProductRecord(id="4", product_name="Mango", price=5.5, qty=5),
    ProductRecord(id="5", product_name="Watermelon", price=8.99, qty=2),
)


def create_store(seed: bool | None = None) -> ProductStore:
    """
    Build a new product store.

    Args:
        seed: Load the demo products. Defaults to ``settings.seed_products``.

    Returns:
        A store holding the seed products, or an empty store
    """
    if seed is None:
        seed = settings.seed_products

    store = ProductStore(SEED_PRODUCTS if seed else ())
    logger.info("Product store initialized", seeded=seed, product_count=len(store))
    return store
