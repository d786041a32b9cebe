"""Persisted record shapes.

Each stored array holds plain objects with camelCase field names and
ISO-8601 timestamps, e.g.::

    {"id": "...", "title": "...", "projectId": "...", "isFavorite": false,
     "createdAt": "2026-01-28T10:00:00Z", ...}
"""

from abc import abstractmethod
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from domain.entities.note import Note
from domain.entities.project import Project
from domain.entities.tag import Tag


class EntityRecord(BaseModel):
    """Common fields of every stored entity."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

    id: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Timestamps written without an offset are UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @abstractmethod
    def to_entity(self) -> Any:
        """Build the domain entity this record stores."""

    def entity_fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).model_fields}


class ProjectRecord(EntityRecord):
    """Stored shape of a Project."""

    name: str
    description: str = ""
    color: str

    def to_entity(self) -> Project:
        return Project(**self.entity_fields())


class TagRecord(EntityRecord):
    """Stored shape of a Tag."""

    name: str
    color: str
    project_id: str

    def to_entity(self) -> Tag:
        return Tag(**self.entity_fields())


class NoteRecord(EntityRecord):
    """Stored shape of a Note."""

    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    project_id: str
    is_favorite: bool = False
    is_archived: bool = False

    def to_entity(self) -> Note:
        fields = self.entity_fields()
        fields["tags"] = list(self.tags)
        return Note(**fields)
