"""Pydantic payloads for Note store operations."""

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Data for creating a Note."""

    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    project_id: str


class NoteUpdate(BaseModel):
    """Partial patch for a Note (all fields optional).

    Only fields explicitly set on the model are applied, so
    ``NoteUpdate(is_favorite=False)`` clears the flag while leaving the
    rest of the note alone.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    project_id: str | None = None
    is_favorite: bool | None = None
    is_archived: bool | None = None
