"""Shared CRUD plumbing for the entity stores."""

import dataclasses
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel

from core.timestamps import touch
from domain.repositories.collection import IEntityCollection


class _Entity(Protocol):
    id: str
    updated_at: Any


E = TypeVar("E", bound=_Entity)


class EntityStore(Generic[E]):
    """Owns the in-memory array of one entity kind.

    Every mutation rewrites the whole array through the collection. When
    another session replaces the stored array, the in-memory copy is
    swapped out wholesale.
    """

    def __init__(self, collection: IEntityCollection[E]) -> None:
        self._collection = collection
        self._items: list[E] = collection.load()
        self._unwatch = collection.on_change(self._replace)

    def get_all(self) -> list[E]:
        """All entities, in insertion order."""
        return list(self._items)

    def get_by_id(self, entity_id: str) -> E | None:
        """Get an entity by ID."""
        return next((item for item in self._items if item.id == entity_id), None)

    def delete(self, entity_id: str) -> bool:
        """Remove an entity by ID. Unknown IDs are not an error."""
        self._items = [item for item in self._items if item.id != entity_id]
        self._save()
        return True

    def close(self) -> None:
        """Stop following external changes."""
        self._unwatch()

    def _add(self, entity: E) -> E:
        self._items = [*self._items, entity]
        self._save()
        return entity

    def _patch(self, entity_id: str, patch: BaseModel | dict[str, Any]) -> E | None:
        index = next(
            (i for i, item in enumerate(self._items) if item.id == entity_id), None
        )
        if index is None:
            return None

        current = self._items[index]
        if isinstance(patch, BaseModel):
            changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        else:
            changes = dict(patch)
        updated = dataclasses.replace(  # type: ignore[type-var]
            current, **changes, updated_at=touch(current.updated_at)
        )

        items = list(self._items)
        items[index] = updated
        self._items = items
        self._save()
        return updated

    def _save(self) -> None:
        self._collection.save(self._items)

    def _replace(self, items: list[E]) -> None:
        self._items = items
