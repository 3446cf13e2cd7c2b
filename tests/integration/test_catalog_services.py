"""Catalog services running against real repositories on in-memory SQLite."""

import pytest
from sqlmodel import Session

from src.catalog.core.exceptions import DatabaseIntegrityError, ResourceNotFoundError
from src.catalog.core.models.page import PageRequest
from src.catalog.core.services.catalog import CategoryService, ProductService
from src.catalog.entities.catalog.category import CategoryDTO, CategoryRepository
from src.catalog.entities.catalog.product import ProductDTO, ProductRepository
from src.catalog.entities.core.errors import EntityNotFoundError


@pytest.fixture
def product_service(session: Session) -> ProductService:
    return ProductService(ProductRepository(session), CategoryRepository(session))


@pytest.fixture
def category_service(session: Session) -> CategoryService:
    return CategoryService(CategoryRepository(session))


@pytest.fixture
def books(category_service) -> CategoryDTO:
    return category_service.insert(CategoryDTO(name="Books"))


class TestProductServiceWithDatabase:
    def test_insert_then_find(self, product_service, books):
        created = product_service.insert(
            ProductDTO(name="The Hobbit", price=45.0, categories=[books])
        )

        found = product_service.find_by_id(created.id)

        assert found == created
        assert found.categories == [books]

    def test_update_existing_product(self, product_service, books):
        created = product_service.insert(ProductDTO(name="Draft", categories=[books]))

        updated = product_service.update(
            created.id, ProductDTO(name="Final", price=10.0, categories=[])
        )

        assert updated.id == created.id
        assert updated.name == "Final"
        assert updated.categories == []

    def test_update_missing_product_is_not_found(self, product_service):
        with pytest.raises(ResourceNotFoundError):
            product_service.update(1000, ProductDTO(name="Ghost"))

    def test_update_with_missing_category_is_not_found(self, product_service, books):
        created = product_service.insert(ProductDTO(name="Draft", categories=[books]))

        with pytest.raises(ResourceNotFoundError):
            product_service.update(
                created.id, ProductDTO(name="Draft", categories=[CategoryDTO(id=999, name="?")])
            )

    def test_insert_with_missing_category_propagates_store_error(self, product_service):
        with pytest.raises(EntityNotFoundError):
            product_service.insert(
                ProductDTO(name="Orphan", categories=[CategoryDTO(id=999, name="?")])
            )

    def test_delete_then_find_is_not_found(self, product_service):
        created = product_service.insert(ProductDTO(name="Temporary"))

        product_service.delete(created.id)

        with pytest.raises(ResourceNotFoundError):
            product_service.find_by_id(created.id)
        with pytest.raises(ResourceNotFoundError):
            product_service.delete(created.id)

    def test_paging_preserves_totals(self, product_service):
        for index in range(5):
            product_service.insert(ProductDTO(name=f"Product {index}"))

        page = product_service.find_all_paged(PageRequest.of(1, 2))

        assert [p.name for p in page.content] == ["Product 2", "Product 3"]
        assert page.total_elements == 5


class TestCategoryServiceWithDatabase:
    def test_delete_category_in_use_is_integrity_error(
        self, session, product_service, category_service, books
    ):
        product_service.insert(ProductDTO(name="The Hobbit", categories=[books]))
        session.commit()

        with pytest.raises(DatabaseIntegrityError):
            category_service.delete(books.id)
        session.rollback()

        assert category_service.find_by_id(books.id) == books
