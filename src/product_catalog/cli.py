#!/usr/bin/env python3
"""
Main CLI entry point for the Product Catalog server.
"""

import os
import sys

import click
import uvicorn

from product_catalog import __version__
from product_catalog.config import settings
from product_catalog.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="product-catalog")
def cli() -> None:
    """Product Catalog CLI - run the GraphQL server."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option(
    "--empty",
    is_flag=True,
    default=False,
    help="Start with an empty product store instead of the demo products",
)
def serve(host: str, port: int, reload: bool, log_level: str, empty: bool) -> None:
    """Start the Product Catalog API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Product Catalog API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads settings at import time, including in reload subprocesses.
    # An explicit PRODUCT_CATALOG_DEBUG wins unless --log-level debug is given.
    if log_level == "debug":
        settings.debug = True
    elif "PRODUCT_CATALOG_DEBUG" not in os.environ:
        settings.debug = False
    os.environ["PRODUCT_CATALOG_DEBUG"] = "true" if settings.debug else "false"
    os.environ["PRODUCT_CATALOG_LOG_LEVEL"] = log_level
    os.environ["PRODUCT_CATALOG_API_HOST"] = host
    os.environ["PRODUCT_CATALOG_API_PORT"] = str(port)
    if empty:
        os.environ["PRODUCT_CATALOG_SEED_PRODUCTS"] = "false"

    # Settings were already loaded in this process; keep them in step
    settings.api_host = host
    settings.api_port = port
    settings.log_level = log_level
    if empty:
        settings.seed_products = False

    try:
        # A single worker process owns the store; no multi-worker mode
        uvicorn.run(
            "product_catalog.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from product_catalog.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
