"""Signals raised by the persistence layer.

Repositories translate engine-specific failures into these types so that
services never depend on SQLAlchemy's exception hierarchy.
"""


class DataAccessError(Exception):
    """Base class for all repository failures."""


class EmptyResultError(DataAccessError):
    """Raised when an operation expected a row for an id and found none."""

    def __init__(self, entity_name: str, entity_id: object) -> None:
        super().__init__(f"No {entity_name} entity with id {entity_id} exists")
        self.entity_name = entity_name
        self.entity_id = entity_id


class EntityNotFoundError(DataAccessError):
    """Raised when a lazy reference is touched and its row does not exist."""

    def __init__(self, entity_name: str, entity_id: object) -> None:
        super().__init__(f"Unable to find {entity_name} with id {entity_id}")
        self.entity_name = entity_name
        self.entity_id = entity_id


class DataIntegrityViolationError(DataAccessError):
    """Raised when the database rejects a write because of a constraint."""


class InvalidSortFieldError(DataAccessError, ValueError):
    """Raised when a page request orders by a column the table does not have."""

    def __init__(self, entity_name: str, field: str) -> None:
        super().__init__(f"Cannot sort {entity_name} by unknown field '{field}'")
        self.field = field
