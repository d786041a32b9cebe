"""Note domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from core.timestamps import utcnow
from domain.entities.project import new_id


@dataclass
class Note:
    """Domain entity for a Note."""

    title: str
    content: str
    project_id: str
    tags: list[str] = field(default_factory=list)
    is_favorite: bool = False
    is_archived: bool = False
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    @property
    def is_active(self) -> bool:
        """Whether the note shows up outside the archive."""
        return not self.is_archived

    def has_tag(self, name: str) -> bool:
        """Exact, case-sensitive tag membership."""
        return name in self.tags
