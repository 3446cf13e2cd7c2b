from .category import router as category_router
from .product import router as product_router

__all__ = ["category_router", "product_router"]
