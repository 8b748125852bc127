"""Tests for record_pager.services.page_window."""

from __future__ import annotations

import pytest

from record_pager.services.page_window import ELLIPSIS, compute_window


def layout(window):
    return ["..." if entry.kind == ELLIPSIS else entry.number for entry in window.entries]


class TestNoWindow:
    @pytest.mark.parametrize(("current", "total"), [(1, 1), (1, 0)])
    def test_single_page_has_no_navigation(self, current: int, total: int) -> None:
        assert compute_window(current, total) is None


class TestPlainWindow:
    def test_two_pages(self) -> None:
        window = compute_window(1, 2)
        assert layout(window) == [1, 2]
        assert not window.show_back
        assert window.show_forward

    def test_ten_pages_are_all_listed(self) -> None:
        window = compute_window(3, 10)
        assert layout(window) == list(range(1, 11))
        assert window.show_back and window.show_forward

    def test_last_page_hides_forward(self) -> None:
        window = compute_window(10, 10)
        assert window.show_back
        assert not window.show_forward


class TestHeadWindow:
    def test_early_page(self) -> None:
        window = compute_window(3, 15)
        assert layout(window) == [1, 2, 3, 4, 5, 6, 7, 8, "...", 15]
        assert window.active_entry.number == 3

    def test_eleven_pages_collapse(self) -> None:
        assert layout(compute_window(1, 11)) == [1, 2, 3, 4, 5, 6, 7, 8, "...", 11]

    def test_page_five_is_last_head_page(self) -> None:
        assert layout(compute_window(5, 11)) == [1, 2, 3, 4, 5, 6, 7, 8, "...", 11]


class TestSlidingWindow:
    def test_page_six_starts_sliding(self) -> None:
        assert layout(compute_window(6, 11)) == [1, "...", 3, 4, 5, 6, 7, 8, 9, "...", 11]

    def test_middle_page(self) -> None:
        assert layout(compute_window(13, 20)) == [1, "...", 10, 11, 12, 13, 14, 15, 16, "...", 20]

    def test_near_tail_keeps_eight_pages(self) -> None:
        window = compute_window(12, 15)
        assert layout(window) == [1, "...", 8, 9, 10, 11, 12, 13, 14, 15]
        assert window.show_forward
        assert window.last_page == 15

    def test_last_page(self) -> None:
        window = compute_window(15, 15)
        assert layout(window) == [1, "...", 8, 9, 10, 11, 12, 13, 14, 15]
        assert not window.show_forward

    def test_range_ending_next_to_last_page_skips_ellipsis(self) -> None:
        assert layout(compute_window(16, 20)) == [1, "...", 13, 14, 15, 16, 17, 18, 19, 20]

    def test_tail_shift(self) -> None:
        assert layout(compute_window(17, 20)) == [1, "...", 13, 14, 15, 16, 17, 18, 19, 20]


class TestWindowInvariants:
    @pytest.mark.parametrize("total", [11, 12, 15, 20, 37])
    def test_exactly_one_active_page_and_no_duplicates(self, total: int) -> None:
        for current in range(1, total + 1):
            window = compute_window(current, total)
            active = [entry for entry in window.entries if entry.active]
            assert [entry.number for entry in active] == [current]
            numbers = window.page_numbers
            assert numbers == sorted(set(numbers))
            assert numbers[0] == 1 and numbers[-1] == total

    def test_page_zero_is_tolerated(self) -> None:
        window = compute_window(0, 15)
        assert window.active_entry is None
        assert window.show_back
