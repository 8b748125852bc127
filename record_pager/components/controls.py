"""Search box and sortable column header components."""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from record_pager.components.table import Column
from record_pager.config import SEARCH_PLACEHOLDER
from record_pager.services.comparator import SortDirection
from record_pager.services.pagination_state import PaginationState


def sort_indicator(column: Column, pager: PaginationState) -> str:
    """Return the arrow shown next to a column title."""
    if pager.sort_field != column.data_name:
        return "↕"
    return "▲" if pager.sort_direction is SortDirection.ASC else "▼"


def _on_search(pager: PaginationState, key: str) -> None:
    pager.search(st.session_state.get(key, ""))


def _on_reset(pager: PaginationState, key: str) -> None:
    st.session_state[key] = ""
    pager.clear_search()


def render_search_box(pager: PaginationState, placeholder: str = SEARCH_PLACEHOLDER) -> None:
    """Render the quick search input and its reset button."""
    key = f"search-{pager.widget_id}"
    search_slot, reset_slot = st.columns([8, 1])
    with search_slot:
        st.text_input(
            "Search",
            key=key,
            placeholder=placeholder,
            label_visibility="collapsed",
            on_change=_on_search,
            args=(pager, key),
        )
    with reset_slot:
        if pager.is_searching:
            st.button("✕", key=f"{key}-reset", on_click=_on_reset, args=(pager, key))


def render_sort_headers(pager: PaginationState, columns: Sequence[Column]) -> None:
    """Render one sort button per column header."""
    if not columns:
        return
    for slot, column in zip(st.columns(len(columns)), columns):
        with slot:
            st.button(
                f"{column.title} {sort_indicator(column, pager)}",
                key=f"sort-{pager.widget_id}-{column.data_name}",
                on_click=pager.toggle_sort,
                args=(column.data_name, column.header_direction),
            )
