"""Unit tests for JSON-array entity collections."""

from datetime import datetime, timezone

import orjson
import pytest

from domain.entities.note import Note
from domain.entities.project import Project
from infrastructure.storage import json_collection
from infrastructure.storage.json_collection import note_collection, project_collection
from infrastructure.storage.local_storage import LocalStorage
from infrastructure.storage.memory_backend import MemoryStorageBackend
from infrastructure.storage.records import EntityRecord
from tests.unit.conftest import BASE_TIME, RecordingLogger, make_note


class TestSave:
    def test_writes_camel_case_records(
        self, storage: LocalStorage, memory_backend: MemoryStorageBackend
    ):
        note = make_note("Alpha", tags=["work"], is_favorite=True)

        note_collection(storage, "notes").save([note])

        raw = orjson.loads(memory_backend.get_item("notes"))
        assert raw == [
            {
                "id": note.id,
                "createdAt": "2026-01-28T10:00:00Z",
                "updatedAt": "2026-01-28T10:00:00Z",
                "title": "Alpha",
                "content": "<p>body</p>",
                "tags": ["work"],
                "projectId": "p1",
                "isFavorite": True,
                "isArchived": False,
            }
        ]


class TestLoad:
    def test_rehydrates_timestamps(self, memory_backend: MemoryStorageBackend):
        memory_backend.set_item(
            "projects",
            orjson.dumps(
                [
                    {
                        "id": "abc",
                        "name": "Work",
                        "description": "",
                        "color": "#667eea",
                        "createdAt": "2026-01-28T10:00:00.000Z",
                        "updatedAt": "2026-01-29T08:30:00.000Z",
                    }
                ]
            ).decode(),
        )

        projects = project_collection(LocalStorage(memory_backend), "projects").load()

        assert projects == [
            Project(
                id="abc",
                name="Work",
                description="",
                color="#667eea",
                created_at=BASE_TIME,
                updated_at=datetime(2026, 1, 29, 8, 30, tzinfo=timezone.utc),
            )
        ]

    def test_naive_timestamps_are_utc(self, memory_backend: MemoryStorageBackend):
        memory_backend.set_item(
            "notes",
            '[{"id": "n", "title": "t", "content": "c", "tags": [], "projectId": "p",'
            ' "isFavorite": false, "isArchived": false,'
            ' "createdAt": "2026-01-28T10:00:00", "updatedAt": "2026-01-28T10:00:00"}]',
        )

        [note] = note_collection(LocalStorage(memory_backend), "notes").load()

        assert note.created_at == BASE_TIME

    def test_missing_key_loads_empty(self, storage: LocalStorage):
        assert note_collection(storage, "notes").load() == []

    def test_only_malformed_records_are_skipped(self, memory_backend: MemoryStorageBackend):
        good = make_note("Keep me")
        note_collection(LocalStorage(memory_backend), "notes").save([good])
        raw = orjson.loads(memory_backend.get_item("notes"))
        memory_backend.set_item(
            "notes", orjson.dumps([raw[0], {"id": "n2", "title": "no project"}]).decode()
        )

        assert note_collection(LocalStorage(memory_backend), "notes").load() == [good]

    def test_skipped_record_is_logged(
        self, memory_backend: MemoryStorageBackend, monkeypatch: pytest.MonkeyPatch
    ):
        recorder = RecordingLogger()
        monkeypatch.setattr(json_collection, "logger", recorder)
        memory_backend.set_item("notes", '[{"id": 1}]')

        assert note_collection(LocalStorage(memory_backend), "notes").load() == []
        [(level, event, context)] = recorder.calls
        assert (level, event) == ("warning", "collection_record_skipped")
        assert context["key"] == "notes"
        assert context["index"] == 0

    def test_non_array_loads_empty(self, memory_backend: MemoryStorageBackend):
        memory_backend.set_item("notes", '{"id": "n"}')

        assert note_collection(LocalStorage(memory_backend), "notes").load() == []

    def test_round_trip_preserves_entities(self, storage: LocalStorage):
        notes = [make_note("A", tags=["x", "x"]), make_note("B", is_archived=True)]
        collection = note_collection(storage, "notes")

        collection.save(notes)

        fresh = note_collection(LocalStorage(storage.backend), "notes").load()
        assert fresh == notes


class TestOnChange:
    def test_forwards_external_replacement(self, memory_backend: MemoryStorageBackend):
        mine = note_collection(LocalStorage(memory_backend), "notes")
        theirs = note_collection(LocalStorage(memory_backend), "notes")
        received: list[list[Note]] = []
        mine.on_change(received.append)

        theirs.save([make_note("From elsewhere")])

        assert [[n.title for n in batch] for batch in received] == [["From elsewhere"]]

    def test_bad_record_from_other_session_keeps_the_rest(
        self, memory_backend: MemoryStorageBackend
    ):
        mine = note_collection(LocalStorage(memory_backend), "notes")
        theirs = LocalStorage(memory_backend)
        received: list[list[Note]] = []
        mine.on_change(received.append)
        good = make_note("Good")
        mine.save([good])

        stored = theirs.read("notes", [])
        theirs.write("notes", [*stored, {"id": "x", "title": "broken"}])

        assert received == [[good]]


class TestRecordBase:
    def test_base_record_is_abstract(self):
        with pytest.raises(TypeError):
            EntityRecord(id="n", created_at=BASE_TIME, updated_at=BASE_TIME)
