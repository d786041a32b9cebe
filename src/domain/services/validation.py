"""Caller-side validation of note, project and tag forms.

The stores accept whatever they are given. These helpers are the checks a
form runs before calling them, raising the matching ``AppException`` on the
first rule that fails and returning a cleaned payload otherwise.
"""

import re
from collections.abc import Sequence

from core.exceptions import (
    DuplicateProjectError,
    DuplicateTagError,
    ProjectRequiredError,
    ValidationError,
)
from domain.entities.project import Project
from domain.entities.tag import Tag
from domain.schemas.note import NoteCreate
from domain.schemas.project import ProjectCreate
from domain.schemas.tag import TagCreate
from domain.services.markup import has_text
from domain.services.project_service import ProjectService
from domain.services.tag_service import TagService

PROJECT_NAME_MAX_LENGTH = 30
PROJECT_DESCRIPTION_MAX_LENGTH = 100
TAG_NAME_MAX_LENGTH = 20

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def validate_color(color: str) -> str:
    if not _HEX_COLOR_RE.match(color):
        raise ValidationError("color", f"Invalid color: {color!r}")
    return color


def validate_note_input(
    title: str,
    content: str,
    project_id: str | None,
    tags: Sequence[str] = (),
) -> NoteCreate:
    """Check a note form; title and content come back trimmed."""
    if not title.strip():
        raise ValidationError("title", "Title and content are required")
    if not has_text(content):
        raise ValidationError("content", "Title and content are required")
    if not project_id:
        raise ProjectRequiredError()
    return NoteCreate(
        title=title.strip(),
        content=content.strip(),
        tags=list(tags),
        project_id=project_id,
    )


def validate_project_input(
    name: str,
    description: str,
    color: str,
    projects: ProjectService,
    current: Project | None = None,
) -> ProjectCreate:
    """Check a project form.

    When editing, pass the project being edited as ``current`` so that
    keeping its own name is not reported as a duplicate.
    """
    name = name.strip()
    description = description.strip()
    if not name:
        raise ValidationError("name", "Project name is required")
    if len(name) > PROJECT_NAME_MAX_LENGTH:
        raise ValidationError(
            "name", f"Project name exceeds {PROJECT_NAME_MAX_LENGTH} characters"
        )
    if len(description) > PROJECT_DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            "description",
            f"Description exceeds {PROJECT_DESCRIPTION_MAX_LENGTH} characters",
        )
    validate_color(color)

    unchanged = current is not None and name.lower() == current.name.lower()
    if not unchanged and projects.exists(name):
        raise DuplicateProjectError(name)

    return ProjectCreate(name=name, description=description, color=color)


def validate_tag_input(
    name: str,
    color: str,
    project_id: str | None,
    tags: TagService,
    current: Tag | None = None,
) -> TagCreate:
    """Check a tag form. Names only need to be unique inside their project.

    When editing, pass the tag as ``current``. Moving it to another project
    is checked against that project's tags.
    """
    name = name.strip()
    if not name:
        raise ValidationError("name", "Tag name is required")
    if len(name) > TAG_NAME_MAX_LENGTH:
        raise ValidationError("name", f"Tag name exceeds {TAG_NAME_MAX_LENGTH} characters")
    if not project_id:
        raise ProjectRequiredError()
    validate_color(color)

    unchanged = (
        current is not None
        and name.lower() == current.name.lower()
        and project_id == current.project_id
    )
    if not unchanged and tags.exists(name, project_id):
        raise DuplicateTagError(name, project_id)

    return TagCreate(name=name, color=color, project_id=project_id)
