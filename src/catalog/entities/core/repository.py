"""Generic SQLModel-backed repository."""

from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select

from src.catalog.core.models.page import Page, PageRequest
from src.catalog.entities.core.errors import (
    DataIntegrityViolationError,
    EmptyResultError,
    InvalidSortFieldError,
)
from src.catalog.entities.core.reference import EntityReference

TableT = TypeVar("TableT", bound=SQLModel)


class SqlRepository(Generic[TableT]):
    """Data-access layer for one table keyed by an integer ``id``.

    Repositories flush but never commit; the transaction belongs to whoever
    owns the session.
    """

    table: ClassVar[type[SQLModel]]
    entity_name: ClassVar[str] = "entity"

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, entity_id: int) -> TableT | None:
        return self._session.get(self.table, entity_id)

    def find_all(self, page_request: PageRequest) -> Page[TableT]:
        total = self._session.exec(
            select(func.count()).select_from(self.table)
        ).one()

        statement = (
            select(self.table)
            .order_by(*self._order_by(page_request))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        rows = list(self._session.exec(statement).all())
        return Page.of(rows, page_request, total=total)

    def save(self, entity: TableT | EntityReference[TableT]) -> TableT:
        if isinstance(entity, EntityReference):
            entity = entity.resolve()
        self._session.add(entity)
        self._session.flush()
        self._session.refresh(entity)
        return entity

    def delete_by_id(self, entity_id: int) -> None:
        entity = self._session.get(self.table, entity_id)
        if entity is None:
            raise EmptyResultError(self.entity_name, entity_id)

        try:
            self._session.delete(entity)
            self._session.flush()
        except IntegrityError as e:
            logger.debug("Delete of {} {} rejected: {}", self.entity_name, entity_id, e.orig)
            raise DataIntegrityViolationError(
                f"{self.entity_name} {entity_id} is still referenced by other records"
            ) from e

    def get_reference(self, entity_id: int) -> EntityReference[TableT]:
        """Return a handle to ``entity_id`` without querying the database."""
        return EntityReference(entity_id, self.find_by_id, self.entity_name)

    def _order_by(self, page_request: PageRequest) -> list[Any]:
        columns = self.table.__table__.columns
        id_column = columns["id"]
        if page_request.sort is None:
            return [id_column.asc()]

        if page_request.sort not in columns:
            raise InvalidSortFieldError(self.entity_name, page_request.sort)

        column = columns[page_request.sort]
        ordered = column.desc() if page_request.direction == "desc" else column.asc()
        # id breaks ties so that paging is stable
        return [ordered, id_column.asc()]
