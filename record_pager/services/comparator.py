"""Record comparison and sorting with numeric, textual and date detection.

Every field value is classified once into a :class:`SortKey` before any
comparison happens:

* falsy values (missing, ``None``, ``""``, ``0``, ``False``, NaN) become the
  number ``0``;
* numbers, booleans and strings that parse as numbers are numeric;
* other strings are lowercased and left-stripped, and are date-like when
  they parse as a date;
* ``date`` and ``datetime`` objects are date-like.

Two non-numeric keys compare as dates when both are date-like and as
locale-collated text otherwise. In every other case the numeric values are
subtracted; a textual side counts as NaN and a NaN difference is a tie, so a
number never orders against a word.
"""

from __future__ import annotations

import enum
import locale
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from functools import cmp_to_key
from typing import Any, List, Mapping, Optional, Sequence

from record_pager.errors import SortError
from record_pager.utils.helpers import is_falsy, parse_datetime, parse_number

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]


class SortDirection(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ValueKind(str, enum.Enum):
    NUMERIC = "numeric"
    TEXTUAL = "textual"
    DATE_LIKE = "date_like"


@dataclass(frozen=True)
class SortKey:
    """A field value tagged with the way it takes part in comparisons."""

    kind: ValueKind
    number: float = math.nan
    text: str = ""
    moment: Optional[datetime] = None

    @property
    def is_numeric(self) -> bool:
        return self.kind is ValueKind.NUMERIC


def classify(value: object) -> SortKey:
    """Tag a raw field value as numeric, textual or date-like."""
    if is_falsy(value):
        return SortKey(ValueKind.NUMERIC, number=0.0)
    if isinstance(value, (bool, int, float)):
        return SortKey(ValueKind.NUMERIC, number=float(value))
    if isinstance(value, (datetime, date)):
        return SortKey(ValueKind.DATE_LIKE, text=value.isoformat(), moment=parse_datetime(value))
    if not isinstance(value, str):
        raise TypeError(f"cannot compare value of type {type(value).__name__}")

    number = parse_number(value)
    if number is not None:
        return SortKey(ValueKind.NUMERIC, number=number)

    text = value.lower().lstrip()
    moment = parse_datetime(text)
    if moment is not None:
        return SortKey(ValueKind.DATE_LIKE, text=text, moment=moment)
    return SortKey(ValueKind.TEXTUAL, text=text)


def compare_keys(first: SortKey, second: SortKey) -> float:
    """Compare two classified values in ascending order."""
    if not first.is_numeric and not second.is_numeric:
        if first.moment is not None and second.moment is not None:
            return (first.moment - second.moment).total_seconds()
        return locale.strcoll(first.text, second.text)

    difference = first.number - second.number
    if math.isnan(difference):
        return 0
    return difference


def compare_records(first: Record, second: Record, field: str, direction: str = SortDirection.ASC) -> float:
    """Compare two records on field; descending order swaps the operands."""
    direction = SortDirection(direction)
    first_key = classify(first.get(field))
    second_key = classify(second.get(field))
    if direction is SortDirection.ASC:
        return compare_keys(first_key, second_key)
    return compare_keys(second_key, first_key)


def sort_records(records: Sequence[Record], field: str, direction: str = SortDirection.ASC) -> List[Record]:
    """Return a new list of records ordered by field.

    The input sequence is never reordered. Any failure while classifying or
    comparing values aborts the whole sort with a :class:`SortError`.
    """
    direction = SortDirection(direction)

    def compare_entries(first: tuple, second: tuple) -> float:
        if direction is SortDirection.ASC:
            return compare_keys(first[0], second[0])
        return compare_keys(second[0], first[0])

    try:
        keyed = [(classify(record.get(field)), record) for record in records]
        keyed.sort(key=cmp_to_key(compare_entries))
    except Exception as exc:
        logger.warning("Sort on %r (%s) failed: %s", field, direction.value, exc)
        raise SortError(field, str(exc)) from exc

    logger.debug("Sorted %d records on %r (%s)", len(keyed), field, direction.value)
    return [record for _, record in keyed]
