"""Exception hierarchy for paging, sorting, searching and rendering."""

from __future__ import annotations

ERROR_PREFIX = "Pagination Error | "


class PaginationError(Exception):
    """Base class for all pager errors."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(ERROR_PREFIX + detail)
        self.detail = detail


class SortError(PaginationError):
    """Comparing two record values failed; the sort was aborted."""

    def __init__(self, field: str = "", reason: str = "") -> None:
        self.field = field
        super().__init__(f"Sort failed on '{field}': {reason}")


class SearchError(PaginationError):
    """Scanning records for a search needle failed."""

    def __init__(self, needle: object = "", reason: str = "") -> None:
        self.needle = needle
        super().__init__(f"Search failed for {needle!r}: {reason}")


class RenderError(PaginationError):
    """A render or navigation callback raised."""

    def __init__(self, callback: str = "renderer", reason: str = "") -> None:
        self.callback = callback
        super().__init__(f"Check the assigned {callback}: {reason}")


class InvalidLimitError(PaginationError, ValueError):
    """Requested page size is not one of the configured limit options."""

    def __init__(self, limit: object = None, options: tuple = ()) -> None:
        self.limit = limit
        self.options = options
        super().__init__(f"Limit {limit!r} is not one of {list(options)}")
