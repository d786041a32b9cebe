"""Project service layer."""

import random

from core.timestamps import utcnow
from domain.entities.project import PROJECT_COLORS, Project
from domain.repositories.collection import IEntityCollection
from domain.schemas.project import ProjectCreate, ProjectUpdate
from domain.services.base import EntityStore
from domain.services.colors import pick_color


class ProjectService(EntityStore[Project]):
    """Service layer for Project lifecycle.

    Uniqueness is not enforced here; callers check :meth:`exists` first.
    Deleting a project leaves its tags and notes pointing at the old id.
    """

    def __init__(
        self,
        collection: IEntityCollection[Project],
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(collection)
        self._rng = rng

    def get_by_name(self, name: str) -> Project | None:
        """Get a project by name, case-insensitively."""
        wanted = name.lower()
        return next((p for p in self._items if p.name.lower() == wanted), None)

    def exists(self, name: str) -> bool:
        """Check whether a project with this name exists (case-insensitive)."""
        return self.get_by_name(name) is not None

    def create(self, data: ProjectCreate) -> Project:
        """Create a new project with trimmed name and description."""
        now = utcnow()
        project = Project(
            name=data.name.strip(),
            description=data.description.strip(),
            color=data.color,
            created_at=now,
            updated_at=now,
        )
        return self._add(project)

    def update(self, project_id: str, patch: ProjectUpdate) -> Project | None:
        """Apply a partial patch; None if the project does not exist."""
        return self._patch(project_id, patch)

    def get_random_color(self) -> str:
        """Pick a palette color not used by any project, if one is left."""
        return pick_color(PROJECT_COLORS, (p.color for p in self._items), self._rng)
