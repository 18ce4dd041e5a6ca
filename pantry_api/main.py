"""FastAPI application for the Pantry API.

This module creates and configures the main FastAPI application,
including routers, middleware, domain error rendering, and lifecycle events.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pantry.graph import ErrorKind, PantryError

from .config import get_settings
from .dependencies import init_dependencies, shutdown_dependencies
from .log_config import configure_logging
from .middleware import RequestContextMiddleware
from .routers import health_router, ingredients_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    The app only becomes ready once Neo4j is connected and the unique
    name constraint is in place; any failure aborts startup.
    """
    settings = get_settings()
    logger.info(
        "Starting Pantry API",
        version=settings.app_version,
        debug=settings.debug,
    )

    try:
        await init_dependencies(settings)
        logger.info("Dependencies initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize dependencies", error=str(e))
        raise

    yield

    logger.info("Shutting down Pantry API")
    await shutdown_dependencies()
    logger.info("Shutdown complete")


def status_for(kind: ErrorKind) -> int:
    """Map an error kind to its HTTP status code."""
    match kind:
        case ErrorKind.VALIDATION:
            return 422  # unprocessable content
        case ErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND
        case ErrorKind.CONFLICT:
            return status.HTTP_409_CONFLICT
        case ErrorKind.DATABASE:
            return status.HTTP_503_SERVICE_UNAVAILABLE


async def pantry_error_handler(request: Request, exc: PantryError) -> JSONResponse:
    """Render a domain error as JSON, keeping the message user-facing."""
    status_code = status_for(exc.kind)
    if exc.kind is ErrorKind.DATABASE:
        logger.error("Database error", path=request.url.path, error=exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.kind.value, "message": exc.message},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        description="Ingredients and their follows relationships, stored in Neo4j.",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(PantryError, pantry_error_handler)

    # Health routes are at root level (/health)
    app.include_router(health_router)
    app.include_router(ingredients_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        """Root endpoint returning API information."""
        return JSONResponse(
            content={
                "name": settings.app_name,
                "version": settings.app_version,
                "docs": "/docs",
                "health": "/health",
            }
        )

    return app


# Create the application instance
app = create_app()
