"""Product repository."""

from src.catalog.entities.catalog.product.table import ProductTable
from src.catalog.entities.core.repository import SqlRepository


class ProductRepository(SqlRepository[ProductTable]):
    """Data-access layer for products."""

    table = ProductTable
    entity_name = "Product"
