"""Product service: CRUD orchestration over the product and category stores."""

from loguru import logger

from src.catalog.core.exceptions import DatabaseIntegrityError, ResourceNotFoundError
from src.catalog.core.models.page import Page, PageRequest
from src.catalog.entities.catalog.category.repository import CategoryRepository
from src.catalog.entities.catalog.product.dto import ProductDTO
from src.catalog.entities.catalog.product.repository import ProductRepository
from src.catalog.entities.catalog.product.table import ProductTable
from src.catalog.entities.core.errors import (
    DataIntegrityViolationError,
    EmptyResultError,
    EntityNotFoundError,
)
from src.catalog.entities.core.reference import EntityReference


class ProductService:
    """Translates between product entities and transfer objects.

    All persistence goes through the two repositories. Store signals the
    service knows how to classify become ``ResourceNotFoundError`` or
    ``DatabaseIntegrityError``; anything else propagates untouched.
    """

    def __init__(
        self,
        repository: ProductRepository,
        category_repository: CategoryRepository,
    ) -> None:
        self._repository = repository
        self._category_repository = category_repository

    def find_all_paged(self, page_request: PageRequest) -> Page[ProductDTO]:
        logger.debug("Listing products page={} size={}", page_request.page, page_request.size)
        page = self._repository.find_all(page_request)
        return page.map(ProductDTO.from_entity)

    def find_by_id(self, product_id: int) -> ProductDTO:
        entity = self._repository.find_by_id(product_id)
        if entity is None:
            raise ResourceNotFoundError("Entity not found")
        return ProductDTO.from_entity(entity)

    def insert(self, dto: ProductDTO) -> ProductDTO:
        entity = ProductTable(name=dto.name)
        self._copy_dto_to_entity(dto, entity)
        entity = self._repository.save(entity)
        logger.info("Created product {}", entity.id)
        return ProductDTO.from_entity(entity)

    def update(self, product_id: int, dto: ProductDTO) -> ProductDTO:
        try:
            entity = self._repository.get_reference(product_id)
            self._copy_dto_to_entity(dto, entity)
            entity = self._repository.save(entity)
        except EntityNotFoundError as e:
            logger.warning("Update of product {} failed: {}", product_id, e)
            raise ResourceNotFoundError(f"Id not found {e.entity_id} ({e.entity_name})") from e

        logger.info("Updated product {}", product_id)
        return ProductDTO.from_entity(entity)

    def delete(self, product_id: int) -> None:
        try:
            self._repository.delete_by_id(product_id)
        except EmptyResultError as e:
            logger.warning("Delete of missing product {}", product_id)
            raise ResourceNotFoundError(f"Id not found {product_id}") from e
        except DataIntegrityViolationError as e:
            logger.warning("Delete of product {} blocked: {}", product_id, e)
            raise DatabaseIntegrityError("Integrity violation") from e

        logger.info("Deleted product {}", product_id)

    def _copy_dto_to_entity(
        self, dto: ProductDTO, entity: ProductTable | EntityReference[ProductTable]
    ) -> None:
        entity.name = dto.name
        entity.description = dto.description
        entity.price = dto.price
        entity.img_url = dto.img_url
        entity.date = dto.date

        # Categories form a set; the first occurrence of a repeated id wins.
        # No upfront existence check; a missing category fails when its reference resolves
        category_ids = list(dict.fromkeys(category.id for category in dto.categories))
        entity.categories = [
            self._category_repository.get_reference(category_id).resolve()
            for category_id in category_ids
        ]
