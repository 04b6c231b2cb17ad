"""
Root GraphQL query definitions
"""

import strawberry

from ..types.product import Product


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def products(self, info: strawberry.Info) -> list[Product | None] | None:
        """Get all products."""
        from ..resolvers.product import resolve_products

        return await resolve_products(info)

    @strawberry.field(name="getProductById")
    async def get_product_by_id(
        self, info: strawberry.Info, id: strawberry.ID | None = None
    ) -> Product | None:
        """Get a product by ID."""
        from ..resolvers.product import resolve_product_by_id

        return await resolve_product_by_id(info, id)

    @strawberry.field(name="getProductTotalPrice")
    async def get_product_total_price(
        self, info: strawberry.Info, id: strawberry.ID | None = None
    ) -> float | None:
        """Multiply a product's price with its qty."""
        from ..resolvers.product import resolve_product_total_price

        return await resolve_product_total_price(info, id)

    @strawberry.field(name="getTotalQtyOfProducts")
    async def get_total_qty_of_products(self, info: strawberry.Info) -> int | None:
        """Sum of qty across all products."""
        from ..resolvers.product import resolve_total_qty_of_products

        return await resolve_total_qty_of_products(info)
