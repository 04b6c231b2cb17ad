"""
Configuration management for the Product Catalog API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphiql: bool = True  # Serve the GraphiQL IDE on GET /graphql

    # Store
    seed_products: bool = True  # Start with the five demo products

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "PRODUCT_CATALOG_"
        case_sensitive = False


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        api_port=settings.api_port,
        seed_products=settings.seed_products,
    )


def get_graphql_url(host: str | None = None, port: int | None = None) -> str:
    """Build the public GraphQL endpoint URL for the configured host and port."""
    host = host or settings.api_host
    port = port or settings.api_port
    # 0.0.0.0 is a bind address, not something a client can open
    if host in ("0.0.0.0", "::"):
        host = "localhost"
    return f"http://{host}:{port}/graphql"
