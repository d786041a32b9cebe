"""Shared listener bookkeeping for storage backends."""

from collections.abc import Callable

import structlog

from domain.repositories.storage_backend import StorageEvent, StorageListener

logger = structlog.get_logger()


class ObservableBackend:
    """Mixin that fans storage events out to subscribed listeners."""

    def __init__(self) -> None:
        self._listeners: list[StorageListener] = []

    def subscribe(self, listener: StorageListener) -> Callable[[], None]:
        """Register a change listener and return its unsubscribe callback."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _dispatch(self, event: StorageEvent) -> None:
        # A failing listener must not stop delivery to the others
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("storage_listener_failed", key=event.key)
