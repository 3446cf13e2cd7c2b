"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.exception_handlers import register_exception_handlers
from src.catalog.api.http.routers import health
from src.catalog.api.http.routers.catalog import category_router, product_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.runtime.context import get_config


def startup(app: FastAPI) -> None:
    """Build application-wide dependencies unless a test already provided them."""
    configure_logging()

    if getattr(app.state, "app_dependencies", None) is None:
        app.state.app_dependencies = ApplicationDependencies(
            database_service=DbSessionService()
        )

    if get_config().database.create_tables_on_startup:
        DbManageService(app.state.app_dependencies.database_service.engine).create_all()

    logger.info("Catalog service started")


def shutdown(app: FastAPI) -> None:
    app.state.app_dependencies.database_service.dispose()
    logger.info("Catalog service stopped")


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


def create_app(app_dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Create the catalog API.

    Passing ``app_dependencies`` skips building the database engine from
    configuration; tests use this to run against an in-memory database.
    """
    config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        startup(app)
        try:
            yield
        finally:
            shutdown(app)

    app = FastAPI(
        title=config.app.name,
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None if config.app.environment == "production" else "/redoc",
    )
    app.state.app_dependencies = app_dependencies

    if config.app.environment == "production" and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(product_router)
    app.include_router(category_router)

    return app


__all__ = ["create_app", "startup", "shutdown"]
