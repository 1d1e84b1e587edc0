"""
Main FastAPI application for the Fence service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..auth.factory import get_auth_adapter
from ..config import Settings, get_settings
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.base import ProfileStoreClient
from ..store.factory import create_profile_store
from .endpoints import timezones

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    store: ProfileStoreClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(debug=settings.debug, log_level=settings.log_level)

    store = store or create_profile_store(settings)
    adapter = get_auth_adapter(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Fence API...", environment=settings.environment)
        yield
        logger.info("Shutting down Fence API...")
        close = getattr(store, "close", None)
        if close is not None:
            await close()

    app = FastAPI(
        title="Fence API",
        description="DinoPark profile query and update service",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Accept", "Content-Type"],
        max_age=3600,
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()
    app.include_router(create_graphql_router(store, settings, adapter), prefix="")
    logger.info("GraphQL endpoint initialized successfully")

    app.include_router(timezones.router, prefix="/api/v4/timezone", tags=["Timezones"])

    return app
