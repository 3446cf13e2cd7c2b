"""Entity package: Category."""

from .dto import CategoryDTO
from .repository import CategoryRepository
from .table import CategoryTable

__all__ = ["CategoryDTO", "CategoryRepository", "CategoryTable"]
