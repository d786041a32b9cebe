"""Shared fixtures for unit tests."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from core.exceptions import StorageError
from domain.entities.note import Note
from infrastructure.storage.local_storage import LocalStorage
from infrastructure.storage.memory_backend import MemoryStorageBackend

BASE_TIME = datetime(2026, 1, 28, 10, 0, tzinfo=timezone.utc)


class FailingStorageBackend(MemoryStorageBackend):
    """Memory backend whose reads and/or writes can be made to fail."""

    def __init__(self, fail_reads: bool = False, fail_writes: bool = False) -> None:
        super().__init__()
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.write_attempts = 0

    def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageError("read refused", key=key)
        return super().get_item(key)

    def set_item(self, key: str, value: str, origin: object | None = None) -> None:
        self.write_attempts += 1
        if self.fail_writes:
            raise StorageError("quota exceeded", key=key)
        super().set_item(key, value, origin)


class RecordingLogger:
    """Stand-in for a module logger; records (level, event, context)."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def __getattr__(self, level: str) -> Callable[..., None]:
        def log(event: str, **kw: Any) -> None:
            self.calls.append((level, event, kw))

        return log

    @property
    def events(self) -> list[str]:
        return [event for _, event, _ in self.calls]


class RecordingListener:
    """Collects every storage event it receives."""

    def __init__(self) -> None:
        self.events: list[Any] = []

    def __call__(self, event: Any) -> None:
        self.events.append(event)


def make_note(
    title: str,
    *,
    minutes: int = 0,
    content: str = "<p>body</p>",
    project_id: str = "p1",
    tags: list[str] | None = None,
    is_favorite: bool = False,
    is_archived: bool = False,
) -> Note:
    """Build a note whose updated_at is ``minutes`` after BASE_TIME."""
    return Note(
        title=title,
        content=content,
        project_id=project_id,
        tags=tags or [],
        is_favorite=is_favorite,
        is_archived=is_archived,
        created_at=BASE_TIME,
        updated_at=BASE_TIME + timedelta(minutes=minutes),
    )


@pytest.fixture
def failing_backend() -> FailingStorageBackend:
    """Backend that passes the probe; tests flip its failure switches."""
    return FailingStorageBackend()


@pytest.fixture
def unavailable_backend() -> FailingStorageBackend:
    """Backend that refuses every write, so the probe fails."""
    return FailingStorageBackend(fail_writes=True)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def other_session(
    memory_backend: MemoryStorageBackend,
) -> Callable[[], LocalStorage]:
    """Factory for another session sharing the same memory backend."""
    return lambda: LocalStorage(memory_backend)
