"""Product database table models."""

from datetime import datetime

from sqlalchemy import Text
from sqlmodel import Field, Relationship, SQLModel

from src.catalog.entities.catalog.category.table import CategoryTable
from src.catalog.entities.core._base import EntityTable


class ProductCategoryLink(SQLModel, table=True):
    """Association between products and the categories they belong to."""

    __tablename__ = "tb_product_category"

    product_id: int | None = Field(
        default=None, foreign_key="tb_product.id", primary_key=True
    )
    category_id: int | None = Field(
        default=None, foreign_key="tb_category.id", primary_key=True
    )


class ProductTable(EntityTable, table=True):
    """Database persistence model for products."""

    __tablename__ = "tb_product"

    name: str = Field(index=True)
    description: str | None = Field(default=None, sa_type=Text)
    price: float | None = None
    img_url: str | None = None
    date: datetime | None = None

    categories: list[CategoryTable] = Relationship(
        link_model=ProductCategoryLink,
        sa_relationship_kwargs={"lazy": "selectin"},
    )
