"""UI selection state feeding the note filter."""

from dataclasses import dataclass

from domain.services.note_filter import ViewMode


@dataclass
class ViewState:
    """What the user currently has selected.

    The mutators encode the reset rules: picking a tag clears the search
    and returns to the ``all`` view, and switching view mode clears both
    the search and the tag.
    """

    view_mode: ViewMode = ViewMode.ALL
    selected_tag: str | None = None
    selected_project_id: str | None = None
    search_term: str = ""

    def set_view_mode(self, view_mode: ViewMode | str) -> None:
        self.view_mode = ViewMode(view_mode)
        self.search_term = ""
        self.selected_tag = None

    def select_tag(self, tag_name: str) -> None:
        """Select a tag, or deselect it when it is already selected."""
        self.selected_tag = None if self.selected_tag == tag_name else tag_name
        self.search_term = ""
        self.view_mode = ViewMode.ALL

    def select_project(self, project_id: str) -> None:
        """Filter by a project, or drop the filter when it is already selected."""
        if self.selected_project_id == project_id:
            self.selected_project_id = None
        else:
            self.selected_project_id = project_id

    def set_search_term(self, term: str) -> None:
        self.search_term = term

    @property
    def is_filtered(self) -> bool:
        """Whether anything narrows the view beyond the default."""
        return bool(
            self.search_term
            or self.view_mode != ViewMode.ALL
            or self.selected_tag
            or self.selected_project_id
        )
