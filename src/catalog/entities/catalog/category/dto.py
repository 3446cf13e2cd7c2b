"""Transfer object: Category."""

from typing import Any

from pydantic import Field

from src.catalog.entities.core._base import TransferObject


class CategoryDTO(TransferObject):
    """Flat projection of a category used at the service boundary."""

    name: str = Field(min_length=1, description="Category name")

    @classmethod
    def from_entity(cls, entity: Any) -> "CategoryDTO":
        return cls.model_validate(entity, from_attributes=True)
