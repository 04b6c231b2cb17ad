"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.product import Product


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addProduct")
    async def add_product(
        self,
        info: strawberry.Info,
        product_name: str | None = None,
        price: float | None = None,
        qty: int | None = None,
    ) -> Product | None:
        """Create a new product."""
        from ..resolvers.product import add_product

        return await add_product(info, product_name, price, qty)

    @strawberry.mutation(name="updateProduct")
    async def update_product(
        self,
        info: strawberry.Info,
        id: strawberry.ID | None = None,
        product_name: str | None = None,
        price: float | None = None,
        qty: int | None = None,
    ) -> Product | None:
        """Replace an existing product; omitted fields become null."""
        from ..resolvers.product import update_product

        return await update_product(info, id, product_name, price, qty)

    @strawberry.mutation(name="deleteProduct")
    async def delete_product(
        self, info: strawberry.Info, id: strawberry.ID | None = None
    ) -> Product | None:
        """Delete a product."""
        from ..resolvers.product import delete_product

        return await delete_product(info, id)
