"""Client-side paging, sorting and searching over in-memory records."""

from record_pager.errors import (
    InvalidLimitError,
    PaginationError,
    RenderError,
    SearchError,
    SortError,
)
from record_pager.services.comparator import SortDirection, compare_records, sort_records
from record_pager.services.page_window import PageEntry, PageWindow, compute_window
from record_pager.services.pagination_state import NavigationView, PaginationState
from record_pager.services.search_engine import search_records
from record_pager.services.type_coercer import TypeCoercer

__version__ = "2.1.0"

__all__ = [
    "InvalidLimitError",
    "NavigationView",
    "PageEntry",
    "PageWindow",
    "PaginationError",
    "PaginationState",
    "RenderError",
    "SearchError",
    "SortDirection",
    "SortError",
    "TypeCoercer",
    "compare_records",
    "compute_window",
    "search_records",
    "sort_records",
]
