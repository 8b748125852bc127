"""Free-text search over records and one level of nested mappings."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, List, Mapping, Optional, Sequence, Set

from record_pager.errors import SearchError

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]


def searchable_text(value: object) -> Optional[str]:
    """Return the lowercased text of a scalar, or None when it carries no text."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return value.lower()
    if isinstance(value, (bool, int, float, datetime, date)):
        return str(value).lower()
    raise TypeError(f"cannot search value of type {type(value).__name__}")


def _contains(value: object, needle: str) -> bool:
    text = searchable_text(value)
    # The empty needle is contained in every scalar, blank ones included.
    if needle == "":
        return True
    return text is not None and needle in text


def field_matches(value: object, needle: str) -> bool:
    """Check one top-level field value against a lowercased needle."""
    if isinstance(value, Mapping):
        return any(
            _contains(str(key), needle) or _contains(nested, needle)
            for key, nested in value.items()
        )
    return _contains(value, needle)


def record_matches(record: Record, needle: str) -> bool:
    """Return True when any field of the record matches; stops at the first match."""
    return any(field_matches(value, needle) for value in record.values())


def search_records(records: Sequence[Record], needle: str, include_matches: bool = True) -> List[Record]:
    """Return matching records, or the non-matching ones when include_matches is False."""
    try:
        lowered = needle.lower()
        matched: Set[int] = {
            index for index, record in enumerate(records) if record_matches(record, lowered)
        }
    except Exception as exc:
        logger.warning("Search for %r failed: %s", needle, exc)
        raise SearchError(needle, str(exc)) from exc

    if include_matches:
        results = [record for index, record in enumerate(records) if index in matched]
    else:
        results = [record for index, record in enumerate(records) if index not in matched]

    logger.debug(
        "Search for %r (%s) kept %d of %d records",
        needle,
        "matches" if include_matches else "non-matches",
        len(results),
        len(records),
    )
    return results
