"""Project domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from core.timestamps import utcnow

PROJECT_COLORS: tuple[str, ...] = (
    "#667eea",
    "#f093fb",
    "#4facfe",
    "#43e97b",
    "#fa709a",
    "#ffecd2",
    "#a8edea",
    "#d299c2",
    "#ff9a9e",
    "#fecfef",
    "#f6d365",
    "#fda085",
    "#8b5cf6",
    "#06b6d4",
    "#84cc16",
    "#f97316",
)


def new_id() -> str:
    """Generate an opaque, globally-unique entity id."""
    return str(uuid4())


@dataclass
class Project:
    """Domain entity for a Project: a named, colored grouping of notes and tags."""

    name: str
    description: str = ""
    color: str = "#667eea"
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
