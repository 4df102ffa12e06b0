"""
Main FastAPI application for Bookshelf backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import get_store, init_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Bookshelf API...")
    store = init_store()
    logger.info(
        "Record store ready",
        authors=store.author_count,
        books=store.book_count,
    )

    yield

    # Shutdown; records are not persisted
    logger.info("Shutting down Bookshelf API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL endpoint over an in-memory catalogue of authors and books",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

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
        store = get_store()
        return {
            "status": "healthy",
            "version": __version__,
            "authors": store.author_count,
            "books": store.book_count,
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router()
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)
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
        "bookshelf.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
