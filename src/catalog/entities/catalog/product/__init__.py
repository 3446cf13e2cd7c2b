"""Entity package: Product."""

from .dto import ProductDTO
from .repository import ProductRepository
from .table import ProductCategoryLink, ProductTable

__all__ = ["ProductCategoryLink", "ProductDTO", "ProductRepository", "ProductTable"]
