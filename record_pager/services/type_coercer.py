"""Per-column value conversion to declared result types."""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from record_pager.config import NUMBER_TYPE, STRING_TYPE
from record_pager.utils.helpers import parse_number

logger = logging.getLogger(__name__)


def to_number(value: object) -> object:
    """Convert a value to a number, returning the original value when it is not numeric."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        number = parse_number(value)
        if number is None:
            logger.debug("Value %r is not numeric, keeping original", value)
            return value
        return int(number) if number.is_integer() else number
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        logger.debug("Could not convert %r to number: %s", value, exc)
        return value


def to_string(value: object) -> str:
    """Convert a value to text, mapping None to an empty string."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class TypeCoercer:
    """Converts raw field values to the type declared for their column."""

    def __init__(self, result_types: Optional[Mapping[str, str]] = None) -> None:
        self.result_types: Dict[str, str] = dict(result_types or {})

    def coerce(self, column: str, value: object) -> object:
        """Return value converted to the declared type of column, or unchanged."""
        declared = self.result_types.get(column)
        if declared == NUMBER_TYPE:
            return to_number(value)
        if declared == STRING_TYPE:
            return to_string(value)
        return value
