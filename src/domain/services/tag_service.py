"""Tag service layer."""

import random
from collections import Counter
from collections.abc import Iterable

from core.timestamps import utcnow
from domain.entities.tag import DEFAULT_TAG_COLOR, TAG_COLORS, Tag
from domain.repositories.collection import IEntityCollection
from domain.schemas.tag import TagCreate, TagUpdate
from domain.services.base import EntityStore
from domain.services.colors import pick_color


class TagService(EntityStore[Tag]):
    """Service layer for Tag lifecycle and tag queries."""

    def __init__(
        self,
        collection: IEntityCollection[Tag],
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(collection)
        self._rng = rng

    def get_by_name(self, name: str) -> Tag | None:
        """First tag with this name in any project, case-insensitively."""
        wanted = name.lower()
        return next((t for t in self._items if t.name.lower() == wanted), None)

    def get_for_project(self, project_id: str) -> list[Tag]:
        """All tags belonging to a project."""
        return [t for t in self._items if t.project_id == project_id]

    def exists(self, name: str, project_id: str | None = None) -> bool:
        """Case-insensitive name check, scoped to project_id when given."""
        wanted = name.lower()
        return any(
            t.name.lower() == wanted and (not project_id or t.project_id == project_id)
            for t in self._items
        )

    def create(self, data: TagCreate) -> Tag:
        """Create a new tag."""
        now = utcnow()
        tag = Tag(
            name=data.name,
            color=data.color,
            project_id=data.project_id,
            created_at=now,
            updated_at=now,
        )
        return self._add(tag)

    def update(self, tag_id: str, patch: TagUpdate) -> Tag | None:
        """Apply a partial patch; None if the tag does not exist.

        Notes that carry the old name are not rewritten.
        """
        return self._patch(tag_id, patch)

    def most_used(self, note_tag_names: Iterable[str]) -> list[Tag]:
        """Known tags that occur in note_tag_names, most frequent first.

        Ties keep store order.
        """
        usage = Counter(note_tag_names)
        used = [t for t in self._items if usage[t.name] > 0]
        return sorted(used, key=lambda t: usage[t.name], reverse=True)

    def suggest(
        self,
        query: str,
        selected: Iterable[str] = (),
        project_id: str | None = None,
        limit: int = 5,
    ) -> list[Tag]:
        """Tags matching a partial name, for tag-input autocompletion.

        Excludes names already selected and, when project_id is given, tags
        of other projects.
        """
        needle = query.lower()
        chosen = set(selected)
        matches = [
            t
            for t in self._items
            if needle in t.name.lower()
            and t.name not in chosen
            and (not project_id or t.project_id == project_id)
        ]
        return matches[:limit]

    def color_for(self, name: str, default: str = DEFAULT_TAG_COLOR) -> str:
        """Display color for a tag name as carried by a note."""
        tag = self.get_by_name(name)
        return tag.color if tag else default

    def get_random_color(self) -> str:
        """Pick a palette color not used by any tag, if one is left."""
        return pick_color(TAG_COLORS, (t.color for t in self._items), self._rng)
