"""Default table rendering for a page of records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st

from record_pager.config import COUNTER_TEXT, EMPTY_MESSAGE
from record_pager.errors import PaginationError
from record_pager.services.comparator import SortDirection
from record_pager.services.type_coercer import TypeCoercer
from record_pager.utils.helpers import normalize_text

TEMPLATE_PATTERN = re.compile(r"{{(.*?)}}")

Record = Mapping[str, Any]


@dataclass(frozen=True)
class ColumnSort:
    """Sort behavior of a column header."""

    active: bool = False
    active_direction: Optional[str] = None


@dataclass(frozen=True)
class Modifier:
    """Function applied to a cell value before display, with extra arguments."""

    method: Callable[..., Any]
    params: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class Column:
    """Describes one table column and the record field it shows."""

    title: str
    data_name: str
    template: Optional[str] = None
    sort: Optional[ColumnSort] = None
    modifier: Optional[Modifier] = None

    @property
    def header_direction(self) -> SortDirection:
        """Direction used when this column's header is first clicked."""
        if self.sort and self.sort.active_direction:
            return SortDirection(self.sort.active_direction)
        return SortDirection.ASC


def columns_from_records(records: Sequence[Record]) -> List[Column]:
    """Build one column per scalar field of the first record."""
    if not records:
        return []
    return [
        Column(title=str(name).replace("_", " ").title(), data_name=str(name))
        for name, value in records[0].items()
        if not isinstance(value, Mapping)
    ]


def initial_sort(columns: Sequence[Column]) -> Optional[Tuple[str, SortDirection]]:
    """Return the field and direction of the last column flagged as actively sorted."""
    selected: Optional[Tuple[str, SortDirection]] = None
    for column in columns:
        if column.sort and column.sort.active:
            selected = (column.data_name, SortDirection(column.sort.active_direction or SortDirection.DESC))
    return selected


def _fill_template(template: str, record: Record) -> str:
    """Replace every {{name}} in template with the record's value for name."""

    def replace(match: re.Match) -> str:
        return normalize_text(record.get(match.group(1)))

    return TEMPLATE_PATTERN.sub(replace, template)


def build_cell_value(record: Record, column: Column, coercer: Optional[TypeCoercer] = None) -> Any:
    """Compute the display value of one cell."""
    value = record.get(column.data_name)
    if column.data_name in record and coercer is not None:
        value = coercer.coerce(column.data_name, value)

    if isinstance(value, Mapping):
        raise PaginationError("Invalid value type!")

    if column.modifier:
        value = column.modifier.method(value, *column.modifier.params)

    cell = _fill_template(column.template, record) if column.template else value

    if isinstance(cell, Mapping):
        raise PaginationError("Invalid value type!")
    return cell


def build_table_frame(
    rows: Sequence[Record],
    columns: Sequence[Column],
    coercer: Optional[TypeCoercer] = None,
) -> pd.DataFrame:
    """Build the display dataframe for a page, indexed by record id or position."""
    titles = [column.title for column in columns]
    if not rows:
        return pd.DataFrame(columns=titles)

    data = [[build_cell_value(record, column, coercer) for column in columns] for record in rows]
    index = [record.get("id") or position for position, record in enumerate(rows)]
    return pd.DataFrame(data, columns=titles, index=index)


def render_table(
    rows: Sequence[Record],
    columns: Sequence[Column],
    coercer: Optional[TypeCoercer] = None,
    *,
    title: Optional[str] = None,
    total: Optional[int] = None,
    counter_text: str = COUNTER_TEXT,
    empty_message: str = EMPTY_MESSAGE,
) -> None:
    """Render a page of records as a read-only table."""
    if title:
        st.markdown(f"##### {title}")
    if total is not None:
        st.caption(f"{total} {counter_text}")

    if not rows:
        st.info(empty_message)
        return

    st.dataframe(build_table_frame(rows, columns, coercer), width="stretch")
