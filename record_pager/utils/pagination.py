"""Pagination helpers for slicing in-memory record lists."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def compute_last_page(total_rows: int, limit: int) -> int:
    """Compute the last page number for the provided limit, never below 1."""
    if limit <= 0:
        return 1
    return max(1, math.ceil(total_rows / limit))


def page_offsets(page: int, limit: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page - 1) * limit
    end = start + limit
    return start, end


def slice_page(rows: Sequence[T], page: int, limit: int) -> List[T]:
    """Return the rows of one page, or an empty list when the page is out of bounds."""
    if page < 1 or page > compute_last_page(len(rows), limit):
        return []
    start, end = page_offsets(page, limit)
    return list(rows[start:end])
