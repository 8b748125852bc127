"""Compact page-index window for navigation controls with many pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from record_pager.config import (
    WINDOW_HEAD_CUTOFF,
    WINDOW_HEAD_PAGES,
    WINDOW_MAX_PLAIN_PAGES,
    WINDOW_RADIUS,
    WINDOW_TAIL_GUARD,
    WINDOW_TAIL_SPAN,
)

PAGE = "page"
ELLIPSIS = "ellipsis"


@dataclass(frozen=True)
class PageEntry:
    """One navigation control: a concrete page or an ellipsis marker."""

    kind: str
    number: Optional[int] = None
    active: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.kind == ELLIPSIS


@dataclass(frozen=True)
class PageWindow:
    """Ordered navigation entries plus back/forward and first/last shortcuts."""

    entries: Tuple[PageEntry, ...]
    current_page: int
    first_page: int
    last_page: int
    show_back: bool
    show_forward: bool

    @property
    def page_numbers(self) -> List[int]:
        return [entry.number for entry in self.entries if not entry.is_ellipsis]

    @property
    def active_entry(self) -> Optional[PageEntry]:
        return next((entry for entry in self.entries if entry.active), None)


def _page(number: int, current_page: int) -> PageEntry:
    return PageEntry(PAGE, number, number == current_page)


def _ellipsis() -> PageEntry:
    return PageEntry(ELLIPSIS)


def compute_window(current_page: int, total_pages: int) -> Optional[PageWindow]:
    """Build the page window, or None when there is at most one page."""
    if total_pages <= 1:
        return None

    entries: List[PageEntry] = []

    if total_pages <= WINDOW_MAX_PLAIN_PAGES:
        entries.extend(_page(number, current_page) for number in range(1, total_pages + 1))
    else:
        if current_page > WINDOW_HEAD_CUTOFF:
            entries.append(_page(1, current_page))
            entries.append(_ellipsis())

            loop_end = min(current_page + WINDOW_RADIUS, total_pages)
            loop_start = current_page - WINDOW_RADIUS
            # Near the tail keep a full run of pages ending at loop_end.
            if total_pages - WINDOW_TAIL_SPAN < current_page and current_page > total_pages - WINDOW_TAIL_GUARD:
                loop_start = loop_end - WINDOW_TAIL_SPAN

            entries.extend(_page(number, current_page) for number in range(loop_start, loop_end + 1))

            if loop_end < total_pages:
                if loop_end < total_pages - 1:
                    entries.append(_ellipsis())
                entries.append(_page(total_pages, current_page))

        if current_page < WINDOW_HEAD_CUTOFF + 1:
            entries.extend(_page(number, current_page) for number in range(1, WINDOW_HEAD_PAGES + 1))
            entries.append(_ellipsis())
            entries.append(_page(total_pages, current_page))

    return PageWindow(
        entries=tuple(entries),
        current_page=current_page,
        first_page=1,
        last_page=total_pages,
        show_back=current_page != 1,
        show_forward=current_page != total_pages,
    )
