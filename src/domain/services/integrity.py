"""Read-only reference checks between projects, tags and notes."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from domain.entities.note import Note
from domain.entities.project import Project
from domain.entities.tag import Tag


@dataclass(frozen=True, slots=True)
class OrphanReport:
    """Tags and notes whose project no longer exists."""

    tags: list[Tag] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.tags and not self.notes


def find_orphans(
    projects: Iterable[Project],
    tags: Iterable[Tag],
    notes: Iterable[Note],
) -> OrphanReport:
    """Report dangling ``project_id`` references.

    Deleting a project never cascades, so its tags and notes stay behind.
    Nothing is modified here.
    """
    project_ids = {p.id for p in projects}
    return OrphanReport(
        tags=[t for t in tags if t.project_id not in project_ids],
        notes=[n for n in notes if n.project_id not in project_ids],
    )
