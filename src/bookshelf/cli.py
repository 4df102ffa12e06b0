#!/usr/bin/env python3
"""
Main CLI entry point for Bookshelf backend server.
"""

import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the GraphQL server."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: BOOKSHELF_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: PORT / BOOKSHELF_API_PORT or 5000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--strict-author-references",
    is_flag=True,
    default=False,
    help="Reject addBook mutations naming an unknown author",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str | None,
    port: int | None,
    reload: bool,
    strict_author_references: bool,
    log_level: str,
) -> None:
    """Start the Bookshelf API server."""

    host = host or settings.api_host
    port = port or settings.api_port

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Environment covers the reload subprocess; this process already holds settings
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
        os.environ["BOOKSHELF_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSHELF_DEBUG", "false")
        os.environ.setdefault("BOOKSHELF_LOG_LEVEL", log_level)
    settings.debug = os.environ["BOOKSHELF_DEBUG"].lower() in ("1", "true", "yes")
    settings.log_level = os.environ["BOOKSHELF_LOG_LEVEL"]
    if strict_author_references:
        os.environ["BOOKSHELF_STRICT_AUTHOR_REFERENCES"] = "true"
        settings.strict_author_references = True

    try:
        # Records live in process memory, so a single worker serves all requests
        uvicorn.run(
            "bookshelf.api.app:app",
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


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
