"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import get_page_request, get_product_service
from src.catalog.core.models.page import Page, PageRequest
from src.catalog.core.services import ProductService
from src.catalog.entities.catalog.product import ProductDTO

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=Page[ProductDTO])
def list_products(
    page_request: PageRequest = Depends(get_page_request),
    service: ProductService = Depends(get_product_service),
) -> Page[ProductDTO]:
    """List products one page at a time."""
    return service.find_all_paged(page_request)


@router.get("/{product_id}", response_model=ProductDTO)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductDTO:
    return service.find_by_id(product_id)


@router.post("", response_model=ProductDTO, status_code=status.HTTP_201_CREATED)
def create_product(
    dto: ProductDTO,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> ProductDTO:
    """Create a product; any id in the body is ignored."""
    created = service.insert(dto)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{product_id}", response_model=ProductDTO)
def update_product(
    product_id: int,
    dto: ProductDTO,
    service: ProductService = Depends(get_product_service),
) -> ProductDTO:
    return service.update(product_id, dto)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
