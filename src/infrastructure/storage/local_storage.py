"""JSON key-value adapter over a storage backend."""

from collections import defaultdict
from collections.abc import Callable
from typing import Any

import orjson
import structlog

from core.exceptions import StorageError
from domain.repositories.storage_backend import StorageBackend, StorageEvent
from infrastructure.storage.memory_backend import MemoryStorageBackend

logger = structlog.get_logger()

KeyWatcher = Callable[[Any], None]


class LocalStorage:
    """Typed JSON accessor with an in-memory mirror.

    On construction the durable backend is probed with a sentinel key. If the
    probe fails, a :class:`MemoryStorageBackend` silently takes its place for
    the rest of the session.

    Reads and writes never raise: decode errors fall back to the caller's
    default, and encode or backend errors are logged while the mirror keeps
    the new value so the session stays consistent.
    """

    SENTINEL_KEY = "__storage_test__"
    SENTINEL_VALUE = '"__storage_test__"'

    def __init__(self, backend: StorageBackend | None = None) -> None:
        if backend is not None and self._probe(backend):
            self._backend: StorageBackend = backend
            self._durable = True
        else:
            self._backend = MemoryStorageBackend()
            self._durable = False
        self._mirror: dict[str, Any] = {}
        self._watchers: dict[str, list[KeyWatcher]] = defaultdict(list)
        self._unsubscribe = self._backend.subscribe(self._on_storage_event)

    @property
    def is_durable(self) -> bool:
        """False when running on the in-memory fallback."""
        return self._durable

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    def read(self, key: str, default: Any = None) -> Any:
        """Return the decoded value under key, or default."""
        if key in self._mirror:
            return self._mirror[key]

        try:
            raw = self._backend.get_item(key)
        except StorageError as e:
            logger.error("storage_read_failed", key=key, error=e.message)
            return default
        if raw is None:
            return default

        try:
            value = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            logger.error("storage_decode_failed", key=key, error=str(e))
            return default

        self._mirror[key] = value
        return value

    def write(self, key: str, value: Any) -> None:
        """Update the mirror and persist value as JSON."""
        self._mirror[key] = value

        try:
            raw = orjson.dumps(value).decode()
        except orjson.JSONEncodeError as e:
            logger.error("storage_encode_failed", key=key, error=str(e))
            return

        try:
            self._backend.set_item(key, raw, origin=self)
        except StorageError as e:
            logger.error("storage_write_failed", key=key, error=e.message)

    def watch(self, key: str, callback: KeyWatcher) -> Callable[[], None]:
        """Call callback with the decoded value whenever another writer changes key."""
        self._watchers[key].append(callback)

        def unwatch() -> None:
            if callback in self._watchers[key]:
                self._watchers[key].remove(callback)

        return unwatch

    def close(self) -> None:
        """Stop listening to the backend."""
        self._unsubscribe()
        self._watchers.clear()

    def _on_storage_event(self, event: StorageEvent) -> None:
        # Own writes are already in the mirror; removals and probes are not propagated
        if (
            event.origin is self
            or event.new_value is None
            or event.key == self.SENTINEL_KEY
        ):
            return

        try:
            value = orjson.loads(event.new_value)
        except orjson.JSONDecodeError as e:
            logger.error("storage_sync_decode_failed", key=event.key, error=str(e))
            return

        self._mirror[event.key] = value
        logger.info("storage_synced", key=event.key)
        for callback in list(self._watchers.get(event.key, [])):
            callback(value)

    @classmethod
    def _probe(cls, backend: StorageBackend) -> bool:
        try:
            backend.set_item(cls.SENTINEL_KEY, cls.SENTINEL_VALUE)
            usable = backend.get_item(cls.SENTINEL_KEY) == cls.SENTINEL_VALUE
            backend.remove_item(cls.SENTINEL_KEY)
        except StorageError as e:
            logger.warning("storage_unavailable_using_memory", error=e.message)
            return False
        if not usable:
            logger.warning("storage_unavailable_using_memory", error="sentinel mismatch")
        return usable
