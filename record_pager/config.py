"""Pager configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"

DATA_FILE = Path(os.getenv("RECORD_PAGER_DATA_FILE", str(DATA_DIR / "records.csv")))
LOG_LEVEL = os.getenv("RECORD_PAGER_LOG_LEVEL", "INFO")

DEFAULT_LIMIT = 10
LIMIT_OPTIONS = [10, 25, 50, 100]
LIMIT_TEXT = "rows"

COUNTER_TEXT = "results"
EMPTY_MESSAGE = "No results available"
SEARCH_PLACEHOLDER = "Search..."

WIDGET_ID_MIN = 10000
WIDGET_ID_MAX = 99999

# Page window thresholds.
WINDOW_MAX_PLAIN_PAGES = 10
WINDOW_HEAD_PAGES = 8
WINDOW_HEAD_CUTOFF = 5
WINDOW_RADIUS = 3
WINDOW_TAIL_SPAN = 7
WINDOW_TAIL_GUARD = 4

NUMBER_TYPE = "number"
STRING_TYPE = "string"

NESTED_COLUMN_SEPARATOR = "."
