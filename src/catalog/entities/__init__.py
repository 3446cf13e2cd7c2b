"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- table.py: Database persistence model
- dto.py: Transfer object handed across the service boundary
- repository.py: Data access layer

Shared building blocks (base classes, store errors, lazy references and the
generic repository) live in ``entities.core``.
"""

from .catalog.category import CategoryDTO, CategoryRepository, CategoryTable
from .catalog.product import (
    ProductCategoryLink,
    ProductDTO,
    ProductRepository,
    ProductTable,
)

__all__ = [
    "CategoryDTO",
    "CategoryRepository",
    "CategoryTable",
    "ProductCategoryLink",
    "ProductDTO",
    "ProductRepository",
    "ProductTable",
]
