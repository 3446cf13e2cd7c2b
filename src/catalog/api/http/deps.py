"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from fastapi import Depends, Query, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.models.page import PageRequest
from src.catalog.core.services import CategoryService, ProductService
from src.catalog.entities.catalog.category import CategoryRepository
from src.catalog.entities.catalog.product import ProductRepository
from src.catalog.runtime.context import get_config


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped session; commits on success, rolls back on error."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    with app_deps.database_service.session_scope() as session:
        yield session


def get_product_service(session: Session = Depends(get_db_session)) -> ProductService:
    return ProductService(ProductRepository(session), CategoryRepository(session))


def get_category_service(session: Session = Depends(get_db_session)) -> CategoryService:
    return CategoryService(CategoryRepository(session))


def get_page_request(
    page: int = Query(default=0, ge=0, description="Zero-based page number"),
    size: int | None = Query(default=None, ge=1, description="Elements per page"),
    sort: str | None = Query(default=None, description="Field to order by"),
    direction: Literal["asc", "desc"] = Query(default="asc"),
) -> PageRequest:
    """Build a page request, applying the configured default and maximum size."""
    pagination = get_config().pagination
    size = min(size or pagination.default_page_size, pagination.max_page_size)
    return PageRequest(page=page, size=size, sort=sort, direction=direction)
