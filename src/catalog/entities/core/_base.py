from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class TransferObject(BaseModel):
    """Base class for boundary-facing projections of persisted entities."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = PydanticField(
        default=None,
        description="Identifier assigned by the store; empty until persisted",
    )


class EntityTable(SQLModel, table=False):
    """Base table with a store-assigned integer identifier and timestamps."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
