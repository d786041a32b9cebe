"""In-process storage backend."""

from domain.repositories.storage_backend import StorageEvent
from infrastructure.storage.base import ObservableBackend


class MemoryStorageBackend(ObservableBackend):
    """Dict-backed implementation of StorageBackend.

    Nothing survives the process. Two adapters sharing one instance see each
    other's writes through change events, the same way two browser tabs
    share one origin.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__()
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str, origin: object | None = None) -> None:
        old_value = self._items.get(key)
        self._items[key] = value
        self._dispatch(StorageEvent(key, old_value, value, origin))

    def remove_item(self, key: str, origin: object | None = None) -> None:
        if key not in self._items:
            return
        old_value = self._items.pop(key)
        self._dispatch(StorageEvent(key, old_value, None, origin))

    def keys(self) -> list[str]:
        return list(self._items)
