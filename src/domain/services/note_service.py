"""Note service layer with search and flag toggles."""

from core.timestamps import utcnow
from domain.entities.note import Note
from domain.schemas.note import NoteCreate, NoteUpdate
from domain.services.base import EntityStore
from domain.services.note_filter import search_notes


class NoteService(EntityStore[Note]):
    """Service layer for Note lifecycle.

    Notes are not validated here. Title, content and project checks belong
    to the caller (see ``domain.services.validation``).
    """

    def create(self, data: NoteCreate) -> Note:
        """Create a note; it starts neither favorite nor archived."""
        now = utcnow()
        note = Note(
            title=data.title,
            content=data.content,
            tags=list(data.tags),
            project_id=data.project_id,
            is_favorite=False,
            is_archived=False,
            created_at=now,
            updated_at=now,
        )
        return self._add(note)

    def update(self, note_id: str, patch: NoteUpdate) -> Note | None:
        """Apply a partial patch; None if the note does not exist."""
        return self._patch(note_id, patch)

    def search(self, term: str) -> list[Note]:
        """Notes whose title, plain-text content or tags contain term."""
        return search_notes(self._items, term)

    def get_favorites(self) -> list[Note]:
        """Favorite notes that are not archived."""
        return [n for n in self._items if n.is_favorite and not n.is_archived]

    def get_archived(self) -> list[Note]:
        return [n for n in self._items if n.is_archived]

    def get_active(self) -> list[Note]:
        return [n for n in self._items if not n.is_archived]

    def get_by_project(self, project_id: str) -> list[Note]:
        return [n for n in self._items if n.project_id == project_id]

    def all_tag_names(self) -> list[str]:
        """Every tag name on every note, duplicates included."""
        return [tag for note in self._items for tag in note.tags]

    def toggle_favorite(self, note_id: str) -> Note | None:
        """Flip is_favorite; None if the note does not exist."""
        note = self.get_by_id(note_id)
        if not note:
            return None
        return self._patch(note_id, {"is_favorite": not note.is_favorite})

    def toggle_archive(self, note_id: str) -> Note | None:
        """Flip is_archived; None if the note does not exist."""
        note = self.get_by_id(note_id)
        if not note:
            return None
        return self._patch(note_id, {"is_archived": not note.is_archived})
