"""Category API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import get_category_service, get_page_request
from src.catalog.core.models.page import Page, PageRequest
from src.catalog.core.services import CategoryService
from src.catalog.entities.catalog.category import CategoryDTO

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=Page[CategoryDTO])
def list_categories(
    page_request: PageRequest = Depends(get_page_request),
    service: CategoryService = Depends(get_category_service),
) -> Page[CategoryDTO]:
    return service.find_all_paged(page_request)


@router.get("/{category_id}", response_model=CategoryDTO)
def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDTO:
    return service.find_by_id(category_id)


@router.post("", response_model=CategoryDTO, status_code=status.HTTP_201_CREATED)
def create_category(
    dto: CategoryDTO,
    response: Response,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDTO:
    created = service.insert(dto)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{category_id}", response_model=CategoryDTO)
def update_category(
    category_id: int,
    dto: CategoryDTO,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDTO:
    return service.update(category_id, dto)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    """Delete a category; fails with 400 while products still use it."""
    service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
