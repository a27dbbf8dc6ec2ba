"""
FastAPI Snap Share application.

Application factory that configures:
- Database lifecycle
- Logging system
- CORS middleware
- Exception handlers
- API routers
- Prometheus metrics
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from snapshare.config import Settings, get_settings
from snapshare.database import Database
from snapshare.exceptions import InvalidCredentialsError, NotFoundError
from snapshare.middlewares import LoggingMiddleware
from snapshare.routers import (
    albums_router,
    folders_router,
    health_router,
    photographers_router,
    photos_router,
)
from snapshare.utils.logger import get_request_id, log_error, log_info, setup_logging
from snapshare.utils.prometheus_metrics import exceptions_total, setup_prometheus

logger = logging.getLogger("snapshare")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Open the database at startup, dispose of it at shutdown."""
    database: Database = app.state.database
    await database.init()
    log_info(
        "Application startup completed",
        event="lifecycle",
        version=app.version,
        port=app.state.settings.port,
    )

    yield

    await database.close()
    log_info("Application shutdown completed", event="lifecycle")


def _storage_error_message(exc: SQLAlchemyError) -> str:
    """Driver message of a storage fault, e.g. 'UNIQUE constraint failed: ...'."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Map application and storage errors to JSON responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": exc.message},
        )

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": exc.message},
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        message = _storage_error_message(exc)
        log_error(
            "Storage error",
            error_type=type(exc).__name__,
            error_message=message,
            http_method=request.method,
            http_path=request.url.path,
            event="db",
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": message},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Unhandled exception handler: ERROR log with traceback, 500 with the
        request ID so the failure can be traced.
        """
        exceptions_total.inc()
        rid = get_request_id()
        log_error(
            "Unhandled exception occurred",
            error_type=type(exc).__name__,
            error_message=str(exc),
            http_method=request.method,
            http_path=request.url.path,
            event="exception",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "request_id": rid},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build a configured FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="API for managing photographers, folders, albums, and photos.",
        openapi_tags=[
            {"name": "Photographers", "description": "Photographer accounts and login"},
            {"name": "Folders", "description": "Folders of a photographer"},
            {"name": "Albums", "description": "Albums of a folder"},
            {"name": "Photos", "description": "Photos of an album"},
        ],
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url)

    if settings.metrics_enabled:
        setup_prometheus(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(photographers_router)
    app.include_router(folders_router)
    app.include_router(albums_router)
    app.include_router(photos_router)

    @app.get("/", tags=["Root"], summary="API information")
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/api-docs",
        }

    return app


def run() -> None:
    """
    Start the server on the configured host and port (env PORT, default 3000).

    uvicorn builds the app through create_app, so importing this module has
    no side effects on logging or the database.
    """
    settings = get_settings()
    uvicorn.run(
        "snapshare.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level="info" if settings.debug else "warning",
    )


if __name__ == "__main__":
    run()
