"""Search and view filtering over notes."""

from collections.abc import Iterable
from enum import StrEnum

from domain.entities.note import Note
from domain.services.markup import strip_markup


class ViewMode(StrEnum):
    """Which notes are eligible for display."""

    ALL = "all"
    FAVORITES = "favorites"
    ARCHIVED = "archived"


def matches_search(note: Note, term: str) -> bool:
    """Case-insensitive substring match on title, plain-text content or any tag."""
    needle = term.lower()
    return (
        needle in note.title.lower()
        or needle in strip_markup(note.content).lower()
        or any(needle in tag.lower() for tag in note.tags)
    )


def search_notes(notes: Iterable[Note], term: str) -> list[Note]:
    """Notes matching term, in their original order.

    A blank term matches everything.
    """
    notes = list(notes)
    if not term.strip():
        return notes
    return [note for note in notes if matches_search(note, term)]


def in_view(note: Note, view_mode: ViewMode) -> bool:
    """Whether a note belongs to a view. Archived notes only show in the archive."""
    if view_mode == ViewMode.FAVORITES:
        return note.is_favorite and not note.is_archived
    if view_mode == ViewMode.ARCHIVED:
        return note.is_archived
    return not note.is_archived


def _narrow(
    notes: Iterable[Note],
    view_mode: ViewMode,
    selected_tag: str | None,
    selected_project_id: str | None,
) -> list[Note]:
    result = list(notes)
    if selected_project_id:
        result = [n for n in result if n.project_id == selected_project_id]
    result = [n for n in result if in_view(n, view_mode)]
    if selected_tag:
        result = [n for n in result if n.has_tag(selected_tag)]
    return result


def filter_notes(
    notes: Iterable[Note],
    view_mode: ViewMode | str = ViewMode.ALL,
    selected_tag: str | None = None,
    selected_project_id: str | None = None,
    search_term: str = "",
) -> list[Note]:
    """Compute the displayed note list.

    Narrowing runs project, then view mode, then tag. A non-blank search
    term restarts from a search over every note and applies the same
    narrowing to its results. The outcome is ordered most recently updated
    first; equal timestamps keep their relative order.
    """
    notes = list(notes)
    view_mode = ViewMode(view_mode)

    if search_term.strip():
        candidates = search_notes(notes, search_term)
    else:
        candidates = notes
    filtered = _narrow(candidates, view_mode, selected_tag, selected_project_id)

    return sorted(filtered, key=lambda n: n.updated_at, reverse=True)
