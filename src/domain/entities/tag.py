"""Tag domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from core.timestamps import utcnow
from domain.entities.project import PROJECT_COLORS, new_id

# Tags draw from the first twelve project colors
TAG_COLORS: tuple[str, ...] = PROJECT_COLORS[:12]

DEFAULT_TAG_COLOR = "#667eea"


@dataclass
class Tag:
    """Domain entity for a Tag.

    Tags belong to one project. Notes refer to a tag by its ``name``, never
    by ``id``, so renaming a tag leaves existing notes on the old name.
    """

    name: str
    project_id: str
    color: str = DEFAULT_TAG_COLOR
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
