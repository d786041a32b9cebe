"""Storage backend protocol."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class StorageEvent:
    """A change to one key, made by some writer other than the listener.

    ``new_value`` is ``None`` when the key was removed.
    """

    key: str
    old_value: str | None
    new_value: str | None
    origin: object | None = None


StorageListener = Callable[[StorageEvent], None]


class StorageBackend(Protocol):
    """A string-keyed, string-valued persistent store."""

    def get_item(self, key: str) -> str | None:
        """Get the raw value stored under key, or None."""
        ...

    def set_item(self, key: str, value: str, origin: object | None = None) -> None:
        """Store a raw value; listeners other than ``origin`` are notified."""
        ...

    def remove_item(self, key: str, origin: object | None = None) -> None:
        """Remove a key if present."""
        ...

    def keys(self) -> list[str]:
        """List every stored key."""
        ...

    def subscribe(self, listener: StorageListener) -> Callable[[], None]:
        """Register a change listener and return its unsubscribe callback."""
        ...
