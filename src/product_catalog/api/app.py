"""
Main FastAPI application for the Product Catalog API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import get_graphql_url, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..seed_data import create_store
from ..store import ProductStore

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Product Catalog API...", environment=settings.environment)
    logger.info(
        "Server ready",
        url=get_graphql_url(),
        product_count=len(app.state.store),
    )

    yield

    logger.info("Shutting down Product Catalog API...")


def create_app(store: ProductStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Product store to serve. A new store (seeded according to
            ``settings.seed_products``) is created when omitted.
    """
    if store is None:
        store = create_store()

    app = FastAPI(
        title="Product Catalog API",
        description="In-memory product catalog served over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__, "products": len(store)}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(store), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Server should not start with a broken schema
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_catalog.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
