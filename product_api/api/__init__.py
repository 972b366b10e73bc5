"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from product_api.api.controller import product_router
from product_api.clients import SqliteClient
from product_api.config import AppConfig, get_config
from product_api.repositories import ProductRepository, RepositoryError, SqliteProductRepository
from product_api.services import SchemaInitializer

logger = logging.getLogger(__name__)


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """Map repository failures to a 500 response. The repository has already logged them."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Repository failure"},
    )


def create_app(
    config: Optional[AppConfig] = None,
    repository: Optional[ProductRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Application configuration. Loaded via get_config() if omitted.
        repository: Product repository to serve. Defaults to the SQLite-backed
            repository for the configured store.
    """
    config = config or get_config()
    sqlite_client = SqliteClient(config.database.path, timeout=config.database.timeout_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # A failure here aborts startup
        SchemaInitializer(sqlite_client).initialize()
        logger.info("Product API started")
        yield
        logger.info("Product API stopped")

    app = FastAPI(
        title="Product API",
        description="CRUD API for product records",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.product_repository = repository or SqliteProductRepository(sqlite_client)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RepositoryError, repository_error_handler)

    # Include routers
    app.include_router(product_router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
