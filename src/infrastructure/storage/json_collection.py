"""JSON-array implementation of IEntityCollection."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

from domain.entities.note import Note
from domain.entities.project import Project
from domain.entities.tag import Tag
from infrastructure.storage.local_storage import LocalStorage
from infrastructure.storage.records import EntityRecord, NoteRecord, ProjectRecord, TagRecord

logger = structlog.get_logger()

E = TypeVar("E")
R = TypeVar("R", bound=EntityRecord)


class JsonCollection(Generic[E, R]):
    """Stores one entity kind as a JSON array under a single storage key."""

    def __init__(self, storage: LocalStorage, key: str, record_type: type[R]) -> None:
        self._storage = storage
        self._key = key
        self._record_type = record_type
        self._adapter: TypeAdapter[list[R]] = TypeAdapter(list[record_type])  # type: ignore[valid-type]

    def load(self) -> list[E]:
        """Load and re-hydrate every stored entity."""
        return self._hydrate(self._storage.read(self._key, []))

    def save(self, entities: list[E]) -> None:
        """Serialize entities and write the whole array."""
        records = [self._record_type.model_validate(entity) for entity in entities]
        payload = self._adapter.dump_python(records, mode="json", by_alias=True)
        self._storage.write(self._key, payload)

    def on_change(self, callback: Callable[[list[E]], None]) -> Callable[[], None]:
        """Forward external replacements of this array as entity lists."""
        return self._storage.watch(self._key, lambda raw: callback(self._hydrate(raw)))

    def _hydrate(self, raw: Any) -> list[E]:
        if not isinstance(raw, list):
            logger.error("collection_decode_failed", key=self._key, reason="not an array")
            return []

        entities: list[E] = []
        for index, item in enumerate(raw):
            try:
                record = self._record_type.model_validate(item)
            except ValidationError as e:
                # one bad element must not discard the whole array
                logger.warning(
                    "collection_record_skipped",
                    key=self._key,
                    index=index,
                    error_count=e.error_count(),
                )
                continue
            entities.append(record.to_entity())
        return entities


def project_collection(storage: LocalStorage, key: str) -> JsonCollection[Project, ProjectRecord]:
    """Collection of projects stored under key."""
    return JsonCollection(storage, key, ProjectRecord)


def tag_collection(storage: LocalStorage, key: str) -> JsonCollection[Tag, TagRecord]:
    """Collection of tags stored under key."""
    return JsonCollection(storage, key, TagRecord)


def note_collection(storage: LocalStorage, key: str) -> JsonCollection[Note, NoteRecord]:
    """Collection of notes stored under key."""
    return JsonCollection(storage, key, NoteRecord)
