"""Tests for record_pager.services.pagination_state."""

from __future__ import annotations

import pytest

from record_pager.config import WIDGET_ID_MAX, WIDGET_ID_MIN
from record_pager.errors import InvalidLimitError, RenderError, SearchError, SortError
from record_pager.services.comparator import SortDirection
from record_pager.services.pagination_state import PaginationState


def ids(records):
    return [record["id"] for record in records]


class TestConstruction:
    def test_defaults(self, pager: PaginationState) -> None:
        assert pager.page == 1
        assert pager.limit == 10
        assert pager.limit_options == (10, 25, 50, 100)
        assert pager.sort_field is None
        assert not pager.is_searching
        assert WIDGET_ID_MIN <= pager.widget_id <= WIDGET_ID_MAX

    def test_construction_does_not_render(self, pager: PaginationState, recorder) -> None:
        assert recorder.renders == []

    def test_limit_must_be_an_option(self) -> None:
        with pytest.raises(InvalidLimitError):
            PaginationState(limit=7)

    def test_from_options(self, numbered_records) -> None:
        pager = PaginationState.from_options({"results": numbered_records, "limit": 25})
        assert pager.limit == 25
        assert pager.last_page() == 1

    def test_from_options_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValueError, match="tableWrapper"):
            PaginationState.from_options({"tableWrapper": None})


class TestVisibleSlice:
    def test_pages_partition_the_results(self, pager: PaginationState, numbered_records) -> None:
        seen = []
        for page in range(1, pager.last_page() + 1):
            pager.go_to_page(page)
            visible = pager.visible_slice()
            assert len(visible) <= pager.limit
            seen.extend(visible)
        assert seen == numbered_records

    def test_last_page_of_empty_pool_is_one(self) -> None:
        pager = PaginationState()
        assert pager.last_page() == 1
        assert pager.visible_slice() == []

    def test_last_page_for_explicit_data(self, pager: PaginationState) -> None:
        assert pager.last_page([{}] * 31) == 4


class TestSetResults:
    def test_resets_page_and_search(self, pager: PaginationState, recorder) -> None:
        pager.go_to_page(3)
        pager.search("row 1")
        pager.set_results([{"id": 1}, {"id": 2}])
        assert pager.page == 1
        assert pager.search_results == []
        assert pager.search_text == ""
        assert recorder.last_rows == [{"id": 1}, {"id": 2}]

    def test_params_are_passed_to_the_renderer(self, pager: PaginationState, recorder) -> None:
        pager.set_results([{"id": 1}], params=["users", 3])
        pager.next_page()
        pager.refresh()
        assert recorder.renders[-1][1] == ("users", 3)

    def test_post_render_runs_after_render(self, numbered_records) -> None:
        calls = []
        pager = PaginationState(
            renderer=lambda rows: calls.append("render"),
            post_render=lambda: calls.append("post"),
        )
        pager.set_results(numbered_records)
        assert calls == ["render", "post"]


class TestNavigation:
    def test_go_to_page(self, pager: PaginationState, recorder) -> None:
        pager.go_to_page(3)
        assert pager.page == 3
        assert ids(recorder.last_rows) == [21, 22, 23, 24, 25]

    def test_go_past_last_page_is_a_no_op(self, pager: PaginationState, recorder) -> None:
        pager.go_to_page(2)
        renders = len(recorder.renders)
        pager.go_to_page(4)
        assert pager.page == 2
        assert len(recorder.renders) == renders

    @pytest.mark.parametrize("page", [0, -2])
    def test_non_positive_pages_are_accepted(self, pager: PaginationState, recorder, page: int) -> None:
        pager.go_to_page(page)
        assert pager.page == page
        assert pager.visible_slice() == []
        assert recorder.last_rows == []

    def test_next_page_stops_at_last(self, pager: PaginationState) -> None:
        for _ in range(5):
            pager.next_page()
        assert pager.page == 3

    def test_previous_page_stops_at_first(self, pager: PaginationState, recorder) -> None:
        pager.previous_page()
        assert pager.page == 1
        assert recorder.renders == []
        pager.go_to_page(2)
        pager.previous_page()
        assert pager.page == 1


class TestSetLimit:
    def test_resets_page_even_when_still_valid(self, pager: PaginationState) -> None:
        pager.go_to_page(2)
        pager.set_limit(25)
        assert pager.page == 1
        assert pager.limit == 25
        assert len(pager.visible_slice()) == 25

    def test_accepts_numeric_text(self, pager: PaginationState) -> None:
        pager.set_limit("50")
        assert pager.limit == 50

    @pytest.mark.parametrize("limit", [7, "lots", None])
    def test_rejects_values_outside_the_options(self, pager: PaginationState, limit: object) -> None:
        pager.go_to_page(2)
        with pytest.raises(InvalidLimitError):
            pager.set_limit(limit)
        assert pager.limit == 10
        assert pager.page == 2


class TestSort:
    def test_sorts_the_full_pool_and_resets_page(self, pager: PaginationState, recorder) -> None:
        pager.go_to_page(2)
        pager.sort("id", "desc")
        assert pager.page == 1
        assert ids(pager.results) == list(range(25, 0, -1))
        assert ids(recorder.last_rows) == list(range(25, 15, -1))
        assert pager.sort_field == "id"
        assert pager.sort_direction is SortDirection.DESC

    def test_does_not_reorder_the_callers_list(self, numbered_records) -> None:
        pager = PaginationState(numbered_records)
        pager.sort("id", "desc")
        assert ids(numbered_records) == list(range(1, 26))

    def test_failed_sort_leaves_state_untouched(self) -> None:
        records = [{"id": 1, "f": "a"}, {"id": 2, "f": {"x": "y"}}]
        pager = PaginationState(records)
        with pytest.raises(SortError):
            pager.sort("f", "asc")
        assert ids(pager.results) == [1, 2]
        assert pager.sort_field is None

    def test_keeps_active_search_in_new_order(self, pager: PaginationState) -> None:
        pager.search("row 1")
        pager.sort("id", "desc")
        assert ids(pager.search_results) == [19, 18, 17, 16, 15, 14, 13, 12, 11, 10, 1]
        assert pager.search_text == "row 1"

    def test_toggle_sort(self, pager: PaginationState) -> None:
        pager.toggle_sort("id")
        assert pager.sort_direction is SortDirection.ASC
        pager.toggle_sort("id")
        assert pager.sort_direction is SortDirection.DESC
        assert ids(pager.visible_slice())[0] == 25
        pager.toggle_sort("label", "desc")
        assert pager.sort_field == "label"
        assert pager.sort_direction is SortDirection.DESC


class TestSearch:
    def test_renders_search_results_from_page_one(self, pager: PaginationState, recorder) -> None:
        pager.go_to_page(2)
        pager.search("row 2")
        assert pager.page == 1
        assert ids(recorder.last_rows) == [2, 20, 21, 22, 23, 24, 25]
        assert recorder.last_view.total_results == 7
        assert recorder.last_view.window is None
        assert pager.is_searching

    def test_exclusion_mode(self, pager: PaginationState) -> None:
        pager.search("row 1", include_matches=False)
        assert len(pager.search_results) == 14
        assert 1 not in ids(pager.search_results)

    def test_search_without_matches(self, pager: PaginationState, recorder) -> None:
        pager.search("nothing here")
        assert recorder.last_rows == []
        assert pager.search_results == []
        assert len(pager.active_results) == 25

    def test_clear_search_routes_through_search_results(self, pager: PaginationState) -> None:
        pager.search("row 2")
        pager.clear_search()
        assert pager.search_text == ""
        assert not pager.is_searching
        assert pager.search_results == pager.results

    def test_clear_search_keeps_records_with_only_blank_fields(self, recorder) -> None:
        records = [{"name": "Alice"}, {"name": None, "note": ""}]
        pager = PaginationState(records, renderer=recorder.render)
        pager.search("alice")
        assert pager.active_results == [records[0]]
        pager.clear_search()
        assert pager.active_results == records
        assert recorder.last_rows == records

    def test_failed_search_leaves_state_untouched(self, pager: PaginationState) -> None:
        pager.go_to_page(2)
        with pytest.raises(SearchError):
            pager.search(None)
        assert pager.page == 2
        assert pager.search_text == ""


class TestPublishing:
    def test_navigation_receives_full_active_data(self, pager: PaginationState, recorder) -> None:
        pager.refresh()
        data, view = recorder.navigations[-1]
        assert len(data) == 25
        assert view.last_page == 3
        assert view.window.page_numbers == [1, 2, 3]
        assert view.window.active_entry.number == 1

    def test_navigation_view_carries_sort_metadata(self, pager: PaginationState, recorder) -> None:
        pager.sort("label", "asc")
        assert recorder.last_view.sort_field == "label"
        assert recorder.last_view.sort_direction is SortDirection.ASC

    def test_single_page_has_no_window(self, recorder) -> None:
        pager = PaginationState([{"id": 1}], renderer=recorder.render, navigation_renderer=recorder.navigate)
        pager.refresh()
        assert recorder.last_view.window is None

    def test_navigation_can_be_disabled(self, numbered_records, recorder) -> None:
        pager = PaginationState(
            numbered_records,
            renderer=recorder.render,
            navigation_renderer=recorder.navigate,
            use_navigation=False,
        )
        pager.next_page()
        assert recorder.navigations == []
        assert len(recorder.renders) == 1

    def test_render_failure_keeps_mutated_state(self, numbered_records) -> None:
        def broken(rows):
            raise RuntimeError("surface gone")

        pager = PaginationState(numbered_records, renderer=broken)
        with pytest.raises(RenderError, match="surface gone") as excinfo:
            pager.next_page()
        assert pager.page == 2
        assert excinfo.value.callback == "renderer"
        assert isinstance(excinfo.value.__cause__, RuntimeError)

    def test_navigation_failure_is_a_render_error(self, numbered_records) -> None:
        def broken(data, view):
            raise ValueError("no menu")

        pager = PaginationState(numbered_records, navigation_renderer=broken)
        with pytest.raises(RenderError) as excinfo:
            pager.set_limit(25)
        assert excinfo.value.callback == "navigation_renderer"
        assert pager.limit == 25
