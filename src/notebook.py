"""Notebook: the composition root of the notes data layer."""

import random

import structlog

from core.config import Settings, get_settings
from core.exceptions import StorageUnavailableError
from core.logging import setup_logging
from domain.entities.note import Note
from domain.entities.tag import Tag
from domain.repositories.storage_backend import StorageBackend
from domain.services.integrity import OrphanReport, find_orphans
from domain.services.markup import truncate_content
from domain.services.note_filter import filter_notes
from domain.services.note_service import NoteService
from domain.services.project_service import ProjectService
from domain.services.tag_service import TagService
from domain.services.view_state import ViewState
from infrastructure.storage.json_collection import (
    note_collection,
    project_collection,
    tag_collection,
)
from infrastructure.storage.local_storage import LocalStorage
from infrastructure.storage.sqlalchemy_backend import SQLAlchemyStorageBackend

logger = structlog.get_logger()


class Notebook:
    """One session's view of the notes data.

    Build exactly one per process and hand it to whatever owns the UI
    state. The storage backend is injected; passing ``None`` runs on the
    in-memory fallback.
    """

    def __init__(
        self,
        backend: StorageBackend | None = None,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._backend = backend
        self.storage = LocalStorage(backend)
        self.projects = ProjectService(
            project_collection(self.storage, self._settings.projects_key), rng=rng
        )
        self.tags = TagService(
            tag_collection(self.storage, self._settings.tags_key), rng=rng
        )
        self.notes = NoteService(note_collection(self.storage, self._settings.notes_key))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Notebook":
        """Open the durable store named by ``settings.storage_url``.

        Call once at process startup; it also configures logging.
        """
        settings = settings or get_settings()
        setup_logging(settings)
        backend: StorageBackend | None
        try:
            backend = SQLAlchemyStorageBackend.from_url(
                settings.storage_url, echo=settings.debug
            )
        except StorageUnavailableError as e:
            logger.warning("durable_storage_unavailable", error=e.message)
            backend = None
        return cls(backend, settings=settings)

    @property
    def settings(self) -> Settings:
        return self._settings

    def filtered_notes(self, view: ViewState) -> list[Note]:
        """The note list to display for the current selection."""
        return filter_notes(
            self.notes.get_all(),
            view_mode=view.view_mode,
            selected_tag=view.selected_tag,
            selected_project_id=view.selected_project_id,
            search_term=view.search_term,
        )

    def project_tags(self, view: ViewState) -> list[Tag]:
        """Tags listed in the sidebar: only those of the selected project."""
        if not view.selected_project_id:
            return []
        return self.tags.get_for_project(view.selected_project_id)

    def preview(self, note: Note) -> str:
        """Card preview text of a note."""
        return truncate_content(note.content, self._settings.preview_length)

    def suggest_tags(
        self,
        query: str,
        selected: list[str],
        project_id: str | None = None,
    ) -> list[Tag]:
        return self.tags.suggest(
            query, selected, project_id, limit=self._settings.tag_suggestion_limit
        )

    def most_used_tags(self) -> list[Tag]:
        """Known tags ranked by how many notes carry them."""
        return self.tags.most_used(self.notes.all_tag_names())

    def find_orphans(self) -> OrphanReport:
        return find_orphans(
            self.projects.get_all(), self.tags.get_all(), self.notes.get_all()
        )

    def poll_changes(self) -> int:
        """Pull writes made by other sessions into this one.

        Only meaningful for a durable backend that supports polling;
        returns the number of keys that changed.
        """
        poll = getattr(self.storage.backend, "poll", None)
        if poll is None:
            return 0
        return len(poll())

    def close(self) -> None:
        """Detach from the backend and release its resources."""
        for store in (self.projects, self.tags, self.notes):
            store.close()
        self.storage.close()
        dispose = getattr(self._backend, "dispose", None)
        if dispose is not None:
            dispose()
