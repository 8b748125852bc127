"""Page, limit, search and sort state over an in-memory record pool."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from record_pager.config import DEFAULT_LIMIT, LIMIT_OPTIONS, LIMIT_TEXT
from record_pager.errors import InvalidLimitError, RenderError
from record_pager.services.comparator import SortDirection, sort_records
from record_pager.services.page_window import PageWindow, compute_window
from record_pager.services.search_engine import search_records
from record_pager.services.type_coercer import TypeCoercer
from record_pager.utils.helpers import generate_widget_id
from record_pager.utils.pagination import compute_last_page, slice_page

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]
Renderer = Callable[..., Any]
NavigationRenderer = Callable[[List[Record], "NavigationView"], Any]

OPTION_KEYS = frozenset(
    {
        "results",
        "limit",
        "limit_options",
        "renderer",
        "navigation_renderer",
        "post_render",
        "params",
        "use_navigation",
        "show_limiter",
        "limit_text",
        "result_types",
    }
)


@dataclass(frozen=True)
class NavigationView:
    """Everything a navigation renderer needs to draw paging and sort controls."""

    total_results: int
    page: int
    limit: int
    last_page: int
    limit_options: Tuple[int, ...]
    limit_text: str
    show_limiter: bool
    window: Optional[PageWindow]
    sort_field: Optional[str]
    sort_direction: SortDirection
    search_text: str


class PaginationState:
    """Owns the record pool and the current page, limit, search and sort.

    Every mutating operation recomputes the visible slice and publishes it:
    ``renderer(visible_rows, *params)``, then ``post_render()``, then, when
    navigation is enabled, ``navigation_renderer(active_rows, view)``.
    Callback failures are raised as :class:`RenderError` after the state
    change has already been applied.
    """

    def __init__(
        self,
        results: Optional[Iterable[Record]] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        limit_options: Optional[Sequence[int]] = None,
        renderer: Optional[Renderer] = None,
        navigation_renderer: Optional[NavigationRenderer] = None,
        post_render: Optional[Callable[[], Any]] = None,
        params: Sequence[Any] = (),
        use_navigation: bool = True,
        show_limiter: bool = True,
        limit_text: str = LIMIT_TEXT,
        result_types: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.widget_id = generate_widget_id()
        self.limit_options: Tuple[int, ...] = tuple(int(option) for option in (limit_options or LIMIT_OPTIONS))
        self.limit = self._validate_limit(limit)
        self.page = 1

        self.renderer = renderer
        self.navigation_renderer = navigation_renderer
        self.post_render = post_render
        self.params: Tuple[Any, ...] = tuple(params)
        self.use_navigation = use_navigation
        self.show_limiter = show_limiter
        self.limit_text = limit_text
        self.coercer = TypeCoercer(result_types)

        self.sort_field: Optional[str] = None
        self.sort_direction = SortDirection.ASC
        self.search_text = ""
        self.search_includes_matches = True

        self._results: List[Record] = list(results or [])
        self._searches: List[Record] = []

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "PaginationState":
        """Build a pager from a mapping of constructor keywords."""
        unknown = set(options) - OPTION_KEYS
        if unknown:
            raise ValueError(f"Unknown pagination options: {sorted(unknown)}")
        return cls(**options)

    # ------------- data pools -------------
    @property
    def results(self) -> List[Record]:
        return list(self._results)

    @property
    def search_results(self) -> List[Record]:
        return list(self._searches)

    @property
    def active_results(self) -> List[Record]:
        return list(self._active())

    @property
    def is_searching(self) -> bool:
        return self.search_text != ""

    def _active(self) -> List[Record]:
        # An empty search result set means no active search.
        return self._searches if self._searches else self._results

    # ------------- queries -------------
    def last_page(self, data: Optional[Sequence[Record]] = None) -> int:
        """Return the last page for data (the active results by default), at least 1."""
        rows = self._active() if data is None else data
        return compute_last_page(len(rows), self.limit)

    def visible_slice(self) -> List[Record]:
        """Return the records on the current page of the active results."""
        return slice_page(self._active(), self.page, self.limit)

    def navigation_view(self, data: Optional[Sequence[Record]] = None) -> NavigationView:
        """Describe the navigation controls for data (the active results by default)."""
        rows = self._active() if data is None else data
        last_page = self.last_page(rows)
        return NavigationView(
            total_results=len(rows),
            page=self.page,
            limit=self.limit,
            last_page=last_page,
            limit_options=self.limit_options,
            limit_text=self.limit_text,
            show_limiter=self.show_limiter,
            window=compute_window(self.page, last_page),
            sort_field=self.sort_field,
            sort_direction=self.sort_direction,
            search_text=self.search_text,
        )

    # ------------- mutations -------------
    def set_results(self, data: Iterable[Record], params: Optional[Sequence[Any]] = None) -> None:
        """Replace the record pool, clear any search and go back to page 1."""
        self.page = 1
        self._results = list(data)
        self._searches = []
        self.search_text = ""
        self.search_includes_matches = True
        if params is not None:
            self.params = tuple(params)

        logger.debug("Loaded %d records into pager %d", len(self._results), self.widget_id)
        self._publish()

    def go_to_page(self, page: int) -> None:
        """Move to page unless it lies past the last page."""
        if page > self.last_page():
            logger.debug("Ignoring navigation to page %d past last page %d", page, self.last_page())
            return
        self.page = page
        self._publish()

    def next_page(self) -> None:
        """Advance one page unless already on the last one."""
        if self.page < self.last_page():
            self.page += 1
            self._publish()

    def previous_page(self) -> None:
        """Go back one page unless already on the first one."""
        if self.page > 1:
            self.page -= 1
            self._publish()

    def set_limit(self, new_limit: int) -> None:
        """Change the number of records per page and return to page 1."""
        self.limit = self._validate_limit(new_limit)
        self.page = 1
        self._publish()

    def sort(self, field: str, direction: str = SortDirection.ASC) -> None:
        """Reorder the whole record pool by field and return to page 1.

        An active search keeps its records, re-ordered to follow the pool.
        A failed sort leaves the pool and the sort metadata untouched.
        """
        direction = SortDirection(direction)
        ordered = sort_records(self._results, field, direction)

        searched = {id(record) for record in self._searches}
        self._results = ordered
        if searched:
            self._searches = [record for record in ordered if id(record) in searched]
        self.sort_field = field
        self.sort_direction = direction
        self.page = 1
        self._publish()

    def toggle_sort(self, field: str, active_direction: str = SortDirection.ASC) -> None:
        """Sort as a column header click would: flip the active field, else use active_direction."""
        if field == self.sort_field:
            direction = self.sort_direction.flipped()
        else:
            direction = SortDirection(active_direction)
        self.sort(field, direction)

    def search(self, text: str, include_matches: bool = True) -> None:
        """Filter the pool by text and render the search results from page 1."""
        results = search_records(self._results, text, include_matches)

        self.page = 1
        self._searches = results
        self.search_text = text
        self.search_includes_matches = include_matches
        self._publish(results)

    def clear_search(self) -> None:
        """Reset the search by searching for the empty string."""
        self.search("", True)

    def refresh(self) -> None:
        """Publish the current view again without changing state."""
        self._publish()

    # ------------- internals -------------
    def _validate_limit(self, limit: object) -> int:
        try:
            value = int(limit)
        except (TypeError, ValueError) as exc:
            raise InvalidLimitError(limit, self.limit_options) from exc
        if value not in self.limit_options:
            raise InvalidLimitError(limit, self.limit_options)
        return value

    def _publish(self, data: Optional[Sequence[Record]] = None) -> None:
        rows = self._active() if data is None else data
        visible = slice_page(rows, self.page, self.limit)

        if self.renderer is not None:
            self._invoke("renderer", self.renderer, visible, *self.params)
        if self.post_render is not None:
            self._invoke("post_render", self.post_render)
        if self.use_navigation and self.navigation_renderer is not None:
            self._invoke("navigation_renderer", self.navigation_renderer, list(rows), self.navigation_view(rows))

    def _invoke(self, name: str, callback: Callable[..., Any], *args: Any) -> None:
        try:
            callback(*args)
        except Exception as exc:
            logger.warning("Pager %d %s failed: %s", self.widget_id, name, exc)
            raise RenderError(name, str(exc)) from exc
