"""Unit tests for ProductService against mocked repositories."""

from unittest.mock import Mock

import pytest

from src.catalog.core.exceptions import DatabaseIntegrityError, ResourceNotFoundError
from src.catalog.core.models.page import Page, PageRequest
from src.catalog.core.services.catalog import ProductService
from src.catalog.entities.catalog.category import CategoryDTO, CategoryRepository
from src.catalog.entities.catalog.product import ProductDTO, ProductRepository
from src.catalog.entities.core.errors import (
    DataIntegrityViolationError,
    EmptyResultError,
    EntityNotFoundError,
)
from src.catalog.entities.core.reference import EntityReference
from tests.fixtures import Factory

EXISTING_ID = 1
NON_EXISTING_ID = 1000
DEPENDENT_ID = 4


@pytest.fixture
def repository() -> Mock:
    return Mock(spec=ProductRepository)


@pytest.fixture
def category_repository() -> Mock:
    return Mock(spec=CategoryRepository)


@pytest.fixture
def service(repository: Mock, category_repository: Mock) -> ProductService:
    return ProductService(repository, category_repository)


@pytest.fixture
def product():
    return Factory.create_product(EXISTING_ID)


@pytest.fixture
def category():
    return Factory.create_category()


@pytest.fixture
def product_dto() -> ProductDTO:
    return Factory.create_product_dto()


def reference_to(entity_id, entity, name="Product") -> EntityReference:
    return EntityReference(entity_id, lambda _id: entity, name)


class TestDelete:
    """Delete delegates once and classifies store signals."""

    def test_delete_does_nothing_when_id_exists(self, service, repository):
        repository.delete_by_id.return_value = None

        service.delete(EXISTING_ID)

        repository.delete_by_id.assert_called_once_with(EXISTING_ID)

    def test_delete_raises_not_found_when_id_does_not_exist(self, service, repository):
        repository.delete_by_id.side_effect = EmptyResultError("Product", NON_EXISTING_ID)

        with pytest.raises(ResourceNotFoundError) as exc_info:
            service.delete(NON_EXISTING_ID)

        assert isinstance(exc_info.value.__cause__, EmptyResultError)
        repository.delete_by_id.assert_called_once_with(NON_EXISTING_ID)

    def test_delete_raises_database_error_when_id_is_dependent(self, service, repository):
        repository.delete_by_id.side_effect = DataIntegrityViolationError("referenced")

        with pytest.raises(DatabaseIntegrityError):
            service.delete(DEPENDENT_ID)

        repository.delete_by_id.assert_called_once_with(DEPENDENT_ID)

    def test_delete_propagates_unclassified_errors(self, service, repository):
        repository.delete_by_id.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError, match="connection lost"):
            service.delete(EXISTING_ID)


class TestFindAllPaged:
    def test_find_all_returns_products_paged(self, service, repository, product):
        page_request = PageRequest.of(0, 10)
        repository.find_all.return_value = Page.of([product], page_request, total=1)

        result = service.find_all_paged(page_request)

        assert result is not None
        repository.find_all.assert_called_once_with(page_request)
        assert [dto.id for dto in result.content] == [product.id]
        assert result.content[0].categories[0].name == "Electronics"

    def test_find_all_preserves_page_metadata(self, service, repository):
        products = [Factory.create_product(i, f"Product {i}") for i in (7, 3, 5)]
        page_request = PageRequest.of(2, 3)
        repository.find_all.return_value = Page.of(products, page_request, total=25)

        result = service.find_all_paged(page_request)

        assert [dto.id for dto in result.content] == [7, 3, 5]
        assert result.number == 2
        assert result.size == 3
        assert result.total_elements == 25
        assert result.total_pages == 9


class TestInsert:
    def test_insert_saves_new_product(
        self, service, repository, category_repository, product, category, product_dto
    ):
        repository.save.return_value = product
        category_repository.get_reference.return_value = reference_to(
            category.id, category, "Category"
        )
        product_dto.id = None

        result = service.insert(product_dto)

        assert result is not None
        assert result.id == EXISTING_ID
        repository.save.assert_called_once()
        category_repository.get_reference.assert_called_once_with(category.id)

    def test_insert_ignores_supplied_id(self, service, repository, category_repository, product, category):
        repository.save.return_value = product
        category_repository.get_reference.return_value = reference_to(
            category.id, category, "Category"
        )
        dto = Factory.create_product_dto()
        dto.id = 99

        service.insert(dto)

        saved = repository.save.call_args.args[0]
        assert saved.id is None
        assert saved.name == dto.name
        assert saved.price == dto.price
        assert saved.categories == [category]

    def test_insert_without_categories_does_not_resolve_any(
        self, service, repository, category_repository, product
    ):
        repository.save.return_value = product
        dto = Factory.create_product_dto()
        dto.categories = []

        service.insert(dto)

        category_repository.get_reference.assert_not_called()

    def test_insert_propagates_missing_category(self, service, repository, category_repository):
        category_repository.get_reference.return_value = EntityReference(
            55, lambda _id: None, "Category"
        )

        with pytest.raises(EntityNotFoundError):
            service.insert(Factory.create_product_dto())

        repository.save.assert_not_called()


class TestUpdate:
    def test_update_saves_existing_product_when_id_exists(
        self, service, repository, category_repository, product, category, product_dto
    ):
        repository.get_reference.return_value = reference_to(product_dto.id, product)
        repository.save.return_value = product
        category_repository.get_reference.return_value = reference_to(
            category.id, category, "Category"
        )
        product_dto.name = "Updated phone"
        product_dto.price = 999.0

        result = service.update(product_dto.id, product_dto)

        assert result is not None
        assert result.name == "Updated phone"
        assert result.price == 999.0
        repository.save.assert_called_once()
        repository.get_reference.assert_called_once_with(product_dto.id)
        category_repository.get_reference.assert_called_once_with(category.id)

    def test_update_raises_not_found_when_reference_is_invalid(self, service, repository, product_dto):
        repository.get_reference.return_value = EntityReference(
            NON_EXISTING_ID, lambda _id: None, "Product"
        )

        with pytest.raises(ResourceNotFoundError):
            service.update(NON_EXISTING_ID, product_dto)

        repository.get_reference.assert_called_once_with(NON_EXISTING_ID)
        repository.save.assert_not_called()

    def test_update_raises_not_found_when_reference_lookup_fails(self, service, repository, product_dto):
        repository.get_reference.side_effect = EntityNotFoundError("Product", NON_EXISTING_ID)

        with pytest.raises(ResourceNotFoundError, match=str(NON_EXISTING_ID)):
            service.update(NON_EXISTING_ID, product_dto)

        repository.get_reference.assert_called_once_with(NON_EXISTING_ID)


class TestFindById:
    def test_find_by_id_returns_dto_when_id_exists(self, service, repository, product):
        repository.find_by_id.return_value = product

        result = service.find_by_id(EXISTING_ID)

        assert result is not None
        assert result.id == EXISTING_ID
        assert result.name == product.name
        assert result.price == product.price
        repository.find_by_id.assert_called_once_with(EXISTING_ID)

    def test_find_by_id_raises_not_found_when_id_does_not_exist(self, service, repository):
        repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundError):
            service.find_by_id(NON_EXISTING_ID)

        repository.find_by_id.assert_called_once_with(NON_EXISTING_ID)


class TestCategoryAssignment:
    def test_repeated_category_ids_are_attached_once(
        self, service, repository, category_repository, product, category
    ):
        other = Factory.create_category(3, "Computers")
        by_id = {category.id: category, other.id: other}
        category_repository.get_reference.side_effect = lambda category_id: reference_to(
            category_id, by_id[category_id], "Category"
        )
        repository.save.return_value = product
        dto = Factory.create_product_dto()
        dto.categories = [
            CategoryDTO(id=other.id, name="Computers"),
            CategoryDTO(id=category.id, name="Electronics"),
            CategoryDTO(id=other.id, name="Computers"),
        ]

        service.insert(dto)

        saved = repository.save.call_args.args[0]
        assert saved.categories == [other, category]
        assert category_repository.get_reference.call_count == 2

    def test_update_names_the_missing_category(
        self, service, repository, category_repository, product, product_dto
    ):
        repository.get_reference.return_value = reference_to(EXISTING_ID, product)
        category_repository.get_reference.return_value = EntityReference(
            55, lambda _id: None, "Category"
        )

        with pytest.raises(ResourceNotFoundError, match=r"Id not found 55 \(Category\)"):
            service.update(EXISTING_ID, product_dto)

        repository.save.assert_not_called()
