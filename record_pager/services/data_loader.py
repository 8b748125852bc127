"""Loading record pools from CSV and JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd

from record_pager.config import NESTED_COLUMN_SEPARATOR

logger = logging.getLogger(__name__)


def records_from_dataframe(dataframe: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a dataframe into a list of plain dict records."""
    if dataframe.empty:
        return []
    cleaned = dataframe.astype(object).where(dataframe.notna(), None)
    return cleaned.to_dict(orient="records")


def nest_columns(records: Sequence[Mapping[str, Any]], separator: str = NESTED_COLUMN_SEPARATOR) -> List[Dict[str, Any]]:
    """Fold "parent.child" columns into one level of nested mappings."""
    nested_records: List[Dict[str, Any]] = []
    for record in records:
        nested: Dict[str, Any] = {}
        for key, value in record.items():
            parent, found, child = str(key).partition(separator)
            if not found or not parent or not child:
                nested[key] = value
                continue
            group = nested.setdefault(parent, {})
            if not isinstance(group, dict):
                raise ValueError(f"Column {key!r} clashes with scalar column {parent!r}")
            group[child] = value
        nested_records.append(nested)
    return nested_records


def load_records(records_file: Path) -> List[Dict[str, Any]]:
    """Load records from a CSV or JSON file."""
    if not records_file.exists():
        raise FileNotFoundError(f"Missing required file: {records_file}")

    suffix = records_file.suffix.lower()
    if suffix == ".csv":
        dataframe = pd.read_csv(records_file, dtype=str).fillna("")
        records = nest_columns(records_from_dataframe(dataframe))
    elif suffix == ".json":
        with records_file.open("r", encoding="utf-8") as json_file:
            payload = json.load(json_file)
        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise ValueError(f"{records_file} must contain a JSON list of objects")
        records = payload
    else:
        raise ValueError(f"Unsupported records file type: {records_file.suffix or records_file.name}")

    logger.info("Loaded %d records from %s", len(records), records_file)
    return records
