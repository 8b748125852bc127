"""Helper utilities for value normalization, number and date parsing."""

from __future__ import annotations

import math
import random
import re
from datetime import date, datetime, timezone
from typing import Optional

from dateutil import parser as date_parser

from record_pager.config import WIDGET_ID_MAX, WIDGET_ID_MIN

DECIMAL_PATTERN = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)$", re.ASCII)
RADIX_PATTERN = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
RADIX_BASES = {"x": 16, "o": 8, "b": 2}
DIGIT_GROUP_PATTERN = re.compile(r"\d+")
MIN_DATE_DIGIT_GROUPS = 2


def generate_widget_id() -> int:
    """Return a random five-digit id used to key UI widgets."""
    return random.randint(WIDGET_ID_MIN, WIDGET_ID_MAX)


def is_falsy(value: object) -> bool:
    """Return True for values treated as empty: None, "", 0, False and NaN."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    return False


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value).strip()


def parse_number(value: str) -> Optional[float]:
    """Parse a string with JavaScript Number() rules, returning None for NaN."""
    text = value.strip()
    if not text:
        return 0.0

    if DECIMAL_PATTERN.match(text):
        return float(text.replace("Infinity", "inf"))

    radix_match = RADIX_PATTERN.match(text)
    if radix_match:
        base = RADIX_BASES[radix_match.group(1).lower()]
        try:
            return float(int(radix_match.group(2), base))
        except ValueError:
            return None

    return None


def parse_datetime(value: object) -> Optional[datetime]:
    """Parse date-like values into naive datetimes, or None when not a date."""
    if isinstance(value, datetime):
        return _to_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    raw_value = value.strip()
    # Words and short codes such as "may", "t3" or "1st" are text, not dates.
    if len(DIGIT_GROUP_PATTERN.findall(raw_value)) < MIN_DATE_DIGIT_GROUPS:
        return None

    try:
        return _to_naive(date_parser.parse(raw_value))
    except (ValueError, OverflowError):
        return None


def _to_naive(moment: datetime) -> datetime:
    """Convert aware datetimes to naive UTC so they compare with naive ones."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)
