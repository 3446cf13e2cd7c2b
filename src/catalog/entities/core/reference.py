"""Lazy entity references."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from src.catalog.entities.core.errors import EntityNotFoundError

T = TypeVar("T")


class EntityReference(Generic[T]):
    """Handle to an entity that is assumed to exist.

    Creating a reference never touches the store. Its ``id`` is known up
    front; the first access to any other attribute (read or write) loads the
    entity through ``loader`` and raises ``EntityNotFoundError`` when the row
    is missing. Every later access goes straight to the loaded entity.
    """

    __slots__ = ("_entity_id", "_entity_name", "_loader", "_target")

    def __init__(
        self,
        entity_id: Any,
        loader: Callable[[Any], T | None],
        entity_name: str = "entity",
    ) -> None:
        object.__setattr__(self, "_entity_id", entity_id)
        object.__setattr__(self, "_entity_name", entity_name)
        object.__setattr__(self, "_loader", loader)
        object.__setattr__(self, "_target", None)

    @property
    def id(self) -> Any:
        return self._entity_id

    @property
    def is_loaded(self) -> bool:
        return self._target is not None

    def resolve(self) -> T:
        """Return the referenced entity, loading it on first use."""
        if self._target is None:
            target = self._loader(self._entity_id)
            if target is None:
                raise EntityNotFoundError(self._entity_name, self._entity_id)
            object.__setattr__(self, "_target", target)
        return self._target

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined on the reference itself
        if name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.resolve(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self.resolve(), name, value)

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "unloaded"
        return f"<EntityReference {self._entity_name}#{self._entity_id} ({state})>"
