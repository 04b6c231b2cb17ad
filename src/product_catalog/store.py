"""
In-memory product store.

The store is the only place product records live. It is owned by the running
application (see ``api.app.create_app``) and handed to GraphQL resolvers
through the request context, so tests can build a fresh instance each time.
"""

from __future__ import annotations

import math
import threading
import uuid
from collections.abc import Iterable
from dataclasses import dataclass

from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProductRecord:
    """A single product held by the store."""

    id: str
    product_name: str | None = None
    price: float | None = None
    qty: int | None = None

    @property
    def total_price(self) -> float | None:
        """Price multiplied by quantity.

        None when either is missing or the product overflows a finite float.
        """
        if self.price is None or self.qty is None:
            return None
        total = self.price * self.qty
        return total if math.isfinite(total) else None


def generate_product_id() -> str:
    """Generate a new product id (random UUID4 string)."""
    return str(uuid.uuid4())


class ProductStore:
    """Ordered, in-memory collection of products keyed by id.

    Lookups that find nothing return None rather than raising. Every
    operation holds the store lock for its whole read/modify/write sequence.
    """

    def __init__(self, products: Iterable[ProductRecord] | None = None) -> None:
        self._lock = threading.RLock()
        self._products: list[ProductRecord] = list(products or [])

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: str | None) -> int | None:
        # Caller must hold the lock
        if product_id is None:
            return None
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None

    def list(self) -> list[ProductRecord]:
        """Return all products in store order."""
        with self._lock:
            return list(self._products)

    def get_by_id(self, product_id: str | None) -> ProductRecord | None:
        """Return the product with the given id, or None."""
        with self._lock:
            index = self._index_of(product_id)
            return self._products[index] if index is not None else None

    def total_price(self, product_id: str | None) -> float | None:
        """Return price * qty for the product, or None if it does not exist."""
        product = self.get_by_id(product_id)
        if product is None:
            return None
        return product.total_price

    def total_quantity(self) -> int:
        """Sum of qty across all products; missing quantities count as 0."""
        with self._lock:
            return sum(product.qty or 0 for product in self._products)

    def add(
        self,
        product_name: str | None = None,
        price: float | None = None,
        qty: int | None = None,
    ) -> ProductRecord:
        """Append a new product with a freshly generated id and return it."""
        with self._lock:
            product_id = generate_product_id()
            while self._index_of(product_id) is not None:
                product_id = generate_product_id()

            product = ProductRecord(
                id=product_id,
                product_name=product_name,
                price=price,
                qty=qty,
            )
            self._products.append(product)

        logger.debug("Product added to store", product_id=product.id)
        return product

    def update(
        self,
        product_id: str | None,
        product_name: str | None = None,
        price: float | None = None,
        qty: int | None = None,
    ) -> ProductRecord | None:
        """Replace the product with the given id.

        Fields not passed become None in the stored record; nothing is merged
        from the previous version. Returns None when no product matches.
        """
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None

            product = ProductRecord(
                id=self._products[index].id,
                product_name=product_name,
                price=price,
                qty=qty,
            )
            self._products[index] = product

        logger.debug("Product replaced in store", product_id=product.id)
        return product

    def delete(self, product_id: str | None) -> ProductRecord | None:
        """Remove the product with the given id and return it, or None."""
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            product = self._products.pop(index)

        logger.debug("Product removed from store", product_id=product.id)
        return product
