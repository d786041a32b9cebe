"""Pytest configuration and fixtures."""

import logging
import random
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import Settings
from infrastructure.storage.local_storage import LocalStorage
from infrastructure.storage.memory_backend import MemoryStorageBackend
from notebook import Notebook


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, storage_namespace="test-notes")


@pytest.fixture
def memory_backend() -> MemoryStorageBackend:
    """A fresh in-process backend."""
    return MemoryStorageBackend()


@pytest.fixture
def storage(memory_backend: MemoryStorageBackend) -> Generator[LocalStorage, None, None]:
    """JSON adapter over the memory backend."""
    adapter = LocalStorage(memory_backend)
    yield adapter
    adapter.close()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for color picks."""
    return random.Random(1234)


@pytest.fixture
def notebook(
    memory_backend: MemoryStorageBackend, settings: Settings, rng: random.Random
) -> Generator[Notebook, None, None]:
    """Notebook on the shared memory backend."""
    nb = Notebook(memory_backend, settings=settings, rng=rng)
    yield nb
    nb.close()


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo any logging configuration a test performs."""
    root = logging.getLogger()
    sql_logger = logging.getLogger("sqlalchemy.engine")
    handlers, level, sql_level = list(root.handlers), root.level, sql_logger.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    sql_logger.setLevel(sql_level)
    structlog.reset_defaults()
