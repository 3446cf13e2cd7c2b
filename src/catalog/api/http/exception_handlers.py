"""Translate catalog service failures into HTTP responses."""

from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from loguru import logger
from pydantic import BaseModel
from starlette.responses import JSONResponse

from src.catalog.core.exceptions import DatabaseIntegrityError, ResourceNotFoundError
from src.catalog.entities.core.errors import InvalidSortFieldError


class StandardError(BaseModel):
    """Error body returned for every handled failure."""

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str


def _error_response(request: Request, status_code: int, error: str, exc: Exception) -> JSONResponse:
    body = StandardError(
        timestamp=datetime.now(UTC),
        status=status_code,
        error=error,
        message=str(exc),
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    logger.info("Resource not found at {}: {}", request.url.path, exc)
    return _error_response(request, status.HTTP_404_NOT_FOUND, "Resource not found", exc)


async def database_integrity_handler(request: Request, exc: DatabaseIntegrityError) -> JSONResponse:
    logger.warning("Integrity violation at {}: {}", request.url.path, exc)
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "Database exception", exc)


async def invalid_sort_handler(request: Request, exc: InvalidSortFieldError) -> JSONResponse:
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "Invalid sort field", exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceNotFoundError, resource_not_found_handler)
    app.add_exception_handler(DatabaseIntegrityError, database_integrity_handler)
    app.add_exception_handler(InvalidSortFieldError, invalid_sort_handler)
