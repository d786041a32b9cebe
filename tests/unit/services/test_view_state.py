"""Unit tests for ViewState selection rules."""

from domain.services.note_filter import ViewMode
from domain.services.view_state import ViewState


class TestViewMode:
    def test_switch_clears_search_and_tag(self):
        view = ViewState(search_term="x", selected_tag="work")

        view.set_view_mode(ViewMode.FAVORITES)

        assert view.view_mode == ViewMode.FAVORITES
        assert view.search_term == ""
        assert view.selected_tag is None

    def test_switch_keeps_project(self):
        view = ViewState(selected_project_id="p1")

        view.set_view_mode("archived")

        assert view.view_mode == ViewMode.ARCHIVED
        assert view.selected_project_id == "p1"


class TestSelectTag:
    def test_select_resets_search_and_view(self):
        view = ViewState(view_mode=ViewMode.ARCHIVED, search_term="x")

        view.select_tag("work")

        assert view.selected_tag == "work"
        assert view.search_term == ""
        assert view.view_mode == ViewMode.ALL

    def test_selecting_again_deselects(self):
        view = ViewState()
        view.select_tag("work")

        view.select_tag("work")

        assert view.selected_tag is None

    def test_selecting_other_tag_replaces(self):
        view = ViewState(selected_tag="work")

        view.select_tag("home")

        assert view.selected_tag == "home"


class TestSelectProject:
    def test_toggle(self):
        view = ViewState()

        view.select_project("p1")
        assert view.selected_project_id == "p1"

        view.select_project("p1")
        assert view.selected_project_id is None

    def test_does_not_touch_other_selection(self):
        view = ViewState(selected_tag="work", search_term="x")

        view.select_project("p1")

        assert view.selected_tag == "work"
        assert view.search_term == "x"


class TestIsFiltered:
    def test_default_is_unfiltered(self):
        assert not ViewState().is_filtered

    def test_any_selection_filters(self):
        assert ViewState(search_term="x").is_filtered
        assert ViewState(view_mode=ViewMode.FAVORITES).is_filtered
        assert ViewState(selected_tag="t").is_filtered
        assert ViewState(selected_project_id="p").is_filtered

    def test_set_search_term(self):
        view = ViewState(selected_tag="work")

        view.set_search_term("plan")

        assert view.search_term == "plan"
        assert view.selected_tag == "work"
