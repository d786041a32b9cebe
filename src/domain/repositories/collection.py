"""Entity collection protocol."""

from collections.abc import Callable
from typing import Protocol, TypeVar

E = TypeVar("E")


class IEntityCollection(Protocol[E]):
    """Persistent array of one entity kind.

    The whole array is loaded and saved at once; there is no per-entity
    write.
    """

    def load(self) -> list[E]:
        """Load every stored entity, in stored order."""
        ...

    def save(self, entities: list[E]) -> None:
        """Replace the stored array with entities."""
        ...

    def on_change(self, callback: Callable[[list[E]], None]) -> Callable[[], None]:
        """Call callback with the new array when another session replaces it."""
        ...
