"""Transfer object: Product."""

from datetime import datetime
from typing import Any

from pydantic import Field

from src.catalog.entities.catalog.category.dto import CategoryDTO
from src.catalog.entities.core._base import TransferObject


class ProductDTO(TransferObject):
    """Flat projection of a product plus summaries of its categories.

    The id is ignored on insert and taken from the path on update.
    """

    name: str = Field(min_length=1, description="Product name")
    description: str | None = Field(default=None, description="Long description")
    price: float | None = Field(default=None, ge=0, description="Unit price")
    img_url: str | None = Field(default=None, description="Image URL")
    date: datetime | None = Field(default=None, description="Release date")
    categories: list[CategoryDTO] = Field(
        default_factory=list, description="Categories the product belongs to"
    )

    @classmethod
    def from_entity(cls, entity: Any) -> "ProductDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            price=entity.price,
            img_url=entity.img_url,
            date=entity.date,
            categories=[CategoryDTO.from_entity(category) for category in entity.categories],
        )
