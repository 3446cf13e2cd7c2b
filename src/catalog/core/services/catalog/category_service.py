"""Category service."""

from loguru import logger

from src.catalog.core.exceptions import DatabaseIntegrityError, ResourceNotFoundError
from src.catalog.core.models.page import Page, PageRequest
from src.catalog.entities.catalog.category.dto import CategoryDTO
from src.catalog.entities.catalog.category.repository import CategoryRepository
from src.catalog.entities.catalog.category.table import CategoryTable
from src.catalog.entities.core.errors import (
    DataIntegrityViolationError,
    EmptyResultError,
    EntityNotFoundError,
)


class CategoryService:
    def __init__(self, repository: CategoryRepository) -> None:
        self._repository = repository

    def find_all_paged(self, page_request: PageRequest) -> Page[CategoryDTO]:
        logger.debug("Listing categories page={} size={}", page_request.page, page_request.size)
        return self._repository.find_all(page_request).map(CategoryDTO.from_entity)

    def find_by_id(self, category_id: int) -> CategoryDTO:
        entity = self._repository.find_by_id(category_id)
        if entity is None:
            raise ResourceNotFoundError("Entity not found")
        return CategoryDTO.from_entity(entity)

    def insert(self, dto: CategoryDTO) -> CategoryDTO:
        entity = self._repository.save(CategoryTable(name=dto.name))
        logger.info("Created category {}", entity.id)
        return CategoryDTO.from_entity(entity)

    def update(self, category_id: int, dto: CategoryDTO) -> CategoryDTO:
        try:
            entity = self._repository.get_reference(category_id)
            entity.name = dto.name
            entity = self._repository.save(entity)
        except EntityNotFoundError as e:
            logger.warning("Update of missing category {}", category_id)
            raise ResourceNotFoundError(f"Id not found {e.entity_id} ({e.entity_name})") from e

        logger.info("Updated category {}", category_id)
        return CategoryDTO.from_entity(entity)

    def delete(self, category_id: int) -> None:
        """Delete a category.

        Raises:
            ResourceNotFoundError: no category has this id.
            DatabaseIntegrityError: products are still filed under it.
        """
        try:
            self._repository.delete_by_id(category_id)
        except EmptyResultError as e:
            logger.warning("Delete of missing category {}", category_id)
            raise ResourceNotFoundError(f"Id not found {category_id}") from e
        except DataIntegrityViolationError as e:
            logger.warning("Delete of category {} blocked: {}", category_id, e)
            raise DatabaseIntegrityError("Integrity violation") from e

        logger.info("Deleted category {}", category_id)
