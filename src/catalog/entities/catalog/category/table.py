"""Category database table model."""

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories.

    Categories are referenced by products through the product/category link
    table; they hold no reference back.
    """

    __tablename__ = "tb_category"

    name: str = Field(index=True)
