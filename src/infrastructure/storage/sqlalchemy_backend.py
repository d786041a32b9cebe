"""SQLAlchemy implementation of the durable storage backend."""

import structlog
from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.exceptions import StorageError, StorageUnavailableError
from domain.repositories.storage_backend import StorageEvent
from infrastructure.database.models import Base, StorageItemModel
from infrastructure.database.session import create_session_factory, create_storage_engine
from infrastructure.storage.base import ObservableBackend

logger = structlog.get_logger()


class SQLAlchemyStorageBackend(ObservableBackend):
    """Durable StorageBackend over a single ``storage_items`` table.

    Writes made through this instance are announced to in-process listeners
    immediately. Writes made by other processes against the same database
    are picked up by :meth:`poll`, which compares row versions against the
    ones this instance last saw.
    """

    def __init__(self, engine: Engine) -> None:
        super().__init__()
        self._engine = engine
        self._session_factory: sessionmaker[Session] = create_session_factory(engine)
        # key -> (version, value) as last observed by this instance
        self._seen: dict[str, tuple[int, str]] = {}
        try:
            Base.metadata.create_all(engine)
            self._seen = self._snapshot()
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Cannot open durable storage: {e}") from e

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "SQLAlchemyStorageBackend":
        """Build a backend from a SQLAlchemy database URL."""
        try:
            engine = create_storage_engine(url, echo=echo)
        except (SQLAlchemyError, ValueError) as e:
            raise StorageUnavailableError(f"Invalid storage URL: {e}") from e
        return cls(engine)

    def get_item(self, key: str) -> str | None:
        try:
            with self._session_factory() as session:
                model = session.get(StorageItemModel, key)
                if model is None:
                    return None
                self._seen[key] = (model.version, model.value)
                return model.value
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read key: {e}", key=key) from e

    def set_item(self, key: str, value: str, origin: object | None = None) -> None:
        try:
            with self._session_factory.begin() as session:
                model = session.get(StorageItemModel, key)
                if model is None:
                    old_value = None
                    model = StorageItemModel(key=key, value=value, version=1)
                    session.add(model)
                else:
                    old_value = model.value
                    model.value = value
                    model.version += 1
                session.flush()
                version = model.version
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write key: {e}", key=key) from e

        self._seen[key] = (version, value)
        self._dispatch(StorageEvent(key, old_value, value, origin))

    def remove_item(self, key: str, origin: object | None = None) -> None:
        try:
            with self._session_factory.begin() as session:
                model = session.get(StorageItemModel, key)
                if model is None:
                    return
                old_value = model.value
                session.execute(delete(StorageItemModel).where(StorageItemModel.key == key))
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to remove key: {e}", key=key) from e

        self._seen.pop(key, None)
        self._dispatch(StorageEvent(key, old_value, None, origin))

    def keys(self) -> list[str]:
        try:
            with self._session_factory() as session:
                stmt = select(StorageItemModel.key).order_by(StorageItemModel.key)
                return list(session.scalars(stmt))
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list keys: {e}") from e

    def poll(self) -> list[StorageEvent]:
        """Detect rows changed by other writers and notify listeners.

        Returns the events that were dispatched. The events carry this
        backend as ``origin`` so no adapter mistakes them for its own writes.
        """
        try:
            current = self._snapshot()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to poll storage: {e}") from e

        events: list[StorageEvent] = []
        for key, (version, value) in current.items():
            previous = self._seen.get(key)
            if previous is None or previous[0] != version:
                old_value = previous[1] if previous else None
                events.append(StorageEvent(key, old_value, value, self))
        for key in self._seen.keys() - current.keys():
            events.append(StorageEvent(key, self._seen[key][1], None, self))

        self._seen = current
        for event in events:
            logger.info("storage_external_change", key=event.key)
            self._dispatch(event)
        return events

    def dispose(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    def _snapshot(self) -> dict[str, tuple[int, str]]:
        with self._session_factory() as session:
            stmt = select(
                StorageItemModel.key,
                StorageItemModel.version,
                StorageItemModel.value,
            )
            return {key: (version, value) for key, version, value in session.execute(stmt)}
