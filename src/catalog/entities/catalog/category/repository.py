"""Category repository."""

from src.catalog.entities.catalog.category.table import CategoryTable
from src.catalog.entities.core.repository import SqlRepository


class CategoryRepository(SqlRepository[CategoryTable]):
    """Data-access layer for categories."""

    table = CategoryTable
    entity_name = "Category"
