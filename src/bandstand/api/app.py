"""
Main FastAPI application for Bandstand
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import get_bind_address, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..players import PlayerStore

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Bandstand API...",
        bind=get_bind_address(),
        players=len(app.state.player_store),
    )

    yield

    logger.info("Shutting down Bandstand API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Bandstand API",
        description="GraphQL demo server with a static player roster",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Shared read-only data for every request
    app.state.player_store = PlayerStore.from_seed()

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
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import validate_schema

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    from .endpoints import graphql, playground

    app.include_router(playground.router, tags=["GraphQL"])
    app.include_router(graphql.router, tags=["GraphQL"])
    logger.info(
        "GraphQL endpoint initialized successfully",
        endpoint=playground.GRAPHQL_ENDPOINT,
        ide=settings.graphql_ide,
    )

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bandstand.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
