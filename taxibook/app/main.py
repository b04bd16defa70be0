"""
FastAPI Application Entry Point.

This is the main application file for the Taxibook Backend.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taxibook.app.core.config import settings
from taxibook.app.api.router import router as api_router
from taxibook.app.db.session import engine, Base, close_engine
from taxibook.app.core.observability import ObservabilityMiddleware, configure_logging
from taxibook.app.core.reliability import install_unhandled_failure_hook
from taxibook.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)

# Import models to ensure they are registered with Base
from taxibook.app.models.customer import Customer
from taxibook.app.models.trip import Trip

logger = logging.getLogger("taxibook")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.

    1. Installs the unhandled-failure logger on the running loop.
    2. Creates database tables on startup (when enabled).
    3. Disposes the shared connection pool on shutdown.
    """
    configure_logging()
    install_unhandled_failure_hook()

    if settings.create_tables_on_startup:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    logger.info("%s %s ready on %s", settings.app_name, settings.api_version, settings.api_prefix)
    yield

    await close_engine()
    logger.info("Connection pool closed")


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="Customer and trip booking API for the taxi service",
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        dict: Status and application information
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.api_version,
    }


# Include API router
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint.

    Returns:
        dict: Welcome message and API documentation links
    """
    return {
        "message": "Welcome to Taxibook Backend API",
        "docs": "/docs",
        "health": "/health",
    }


def run():
    """Serve the application with uvicorn."""
    import uvicorn
    uvicorn.run(
        "taxibook.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
