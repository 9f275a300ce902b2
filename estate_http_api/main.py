from __future__ import annotations

"""
Entry point for the Estate back-office HTTP API.

This module creates the FastAPI application, wires up middleware and error
handlers, and mounts every resource router under the configured prefix.

Intended usage:
    uvicorn estate_http_api.main:app --host 0.0.0.0 --port 8080
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from estate_http_api.config import AppEnv, Settings, get_settings
from estate_http_api.db.seed import seed_sample_data
from estate_http_api.db.session import db_session, init_db
from estate_http_api.errors import DuplicateError, EstateError, NotFoundError, ValidationError
from estate_http_api.logging import get_logger
from estate_http_api.logging.config import configure_logging
from estate_http_api.routers import ALL_ROUTERS
from estate_http_api.schemas.common import HealthResponse

log = get_logger(__name__)


def _error(code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content={"status": "error", "code": code, "message": message},
    )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    cfg = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Startup: logging, schema creation, optional sample data.
        """
        configure_logging(cfg)
        init_db()
        if cfg.SEED_SAMPLE_DATA:
            with db_session() as session:
                seed_sample_data(session)

        log.info(
            "app_started",
            app=cfg.APP_NAME,
            env=cfg.APP_ENV.value,
            version=cfg.APP_VERSION,
            api_root=cfg.api_root,
        )
        yield
        log.info("app_stopped", app=cfg.APP_NAME)

    docs_enabled = cfg.APP_ENV != AppEnv.PRODUCTION
    app = FastAPI(
        title="Estate Back-office API",
        version=cfg.APP_VERSION,
        description="Property, client and contract management with document integrity services.",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global exception handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(DuplicateError)
    async def duplicate_handler(request: Request, exc: DuplicateError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(EstateError)
    async def estate_error_handler(request: Request, exc: EstateError) -> JSONResponse:
        log.warning("request_failed", path=request.url.path, error=type(exc).__name__)
        return _error(status.HTTP_400_BAD_REQUEST, "Bad request")

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Catches unhandled exceptions so stack traces never reach clients.
        """
        log.error("unhandled_exception", path=request.url.path, exc_info=exc)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) if cfg.DEBUG else "Internal Server Error",
        )

    @app.get(f"{cfg.api_root}/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(
            app=cfg.APP_NAME,
            version=cfg.APP_VERSION,
            env=cfg.APP_ENV.value,
        )

    for router in ALL_ROUTERS:
        app.include_router(router, prefix=cfg.api_root)

    return app


# Default application instance
app = create_app()


# ---------------------------------------------------------------------------
# Local development entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    import uvicorn

    cfg = get_settings()
    uvicorn.run(
        "estate_http_api.main:app",
        host=cfg.HOST,
        port=cfg.PORT,
        reload=cfg.APP_ENV == AppEnv.DEVELOPMENT and cfg.DEBUG,
    )
