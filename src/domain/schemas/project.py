"""Pydantic payloads for Project store operations."""

from pydantic import BaseModel, ConfigDict


class ProjectCreate(BaseModel):
    """Data for creating a Project."""

    name: str
    description: str = ""
    color: str


class ProjectUpdate(BaseModel):
    """Partial patch for a Project; unset fields are left untouched."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None
    color: str | None = None
