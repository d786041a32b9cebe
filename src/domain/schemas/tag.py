"""Pydantic payloads for Tag store operations."""

from pydantic import BaseModel, ConfigDict


class TagCreate(BaseModel):
    """Data for creating a Tag."""

    name: str
    color: str
    project_id: str


class TagUpdate(BaseModel):
    """Partial patch for a Tag."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    color: str | None = None
    project_id: str | None = None
