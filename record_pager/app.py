"""Streamlit app entrypoint for browsing a record file page by page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import streamlit as st

from record_pager.components.controls import render_search_box, render_sort_headers
from record_pager.components.navigation import render_navigation
from record_pager.components.table import columns_from_records, initial_sort, render_table
from record_pager.config import DATA_FILE, LOG_LEVEL
from record_pager.errors import PaginationError
from record_pager.services import data_loader
from record_pager.services.pagination_state import NavigationView, PaginationState

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Record Pager", layout="wide")


def configure_logging() -> None:
    """Configure root logging from the configured level name."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def remember_rows(rows: List[Dict[str, Any]], *params: Any) -> None:
    """Render callback: keep the visible page for the next draw."""
    st.session_state["frame"]["rows"] = list(rows)


def remember_navigation(data: List[Dict[str, Any]], view: NavigationView) -> None:
    """Navigation callback: keep the navigation view for the next draw."""
    st.session_state["frame"]["navigation"] = view


@st.cache_data(show_spinner=False)
def get_records(records_path: str, file_mtime: float) -> List[Dict[str, Any]]:
    """Load records with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_records(Path(records_path))


def init_session_state(records: List[Dict[str, Any]]) -> PaginationState:
    """Create the pager once per session and publish its first page."""
    st.session_state.setdefault("frame", {"rows": [], "navigation": None})
    if "pager" in st.session_state:
        return st.session_state["pager"]

    pager = PaginationState(renderer=remember_rows, navigation_renderer=remember_navigation)
    columns = columns_from_records(records)
    pager.set_results(records)

    sort_on_load = initial_sort(columns)
    if sort_on_load is not None:
        pager.sort(*sort_on_load)

    st.session_state["columns"] = columns
    st.session_state["pager"] = pager
    return pager


def main() -> None:
    """Render and run the record browser."""
    configure_logging()

    try:
        if not DATA_FILE.exists():
            st.error(f"Records file not found: {DATA_FILE}")
            st.stop()
        records = get_records(str(DATA_FILE), DATA_FILE.stat().st_mtime)
        pager = init_session_state(records)
    except (ValueError, PaginationError) as exc:
        logger.error("Could not load %s: %s", DATA_FILE, exc)
        st.error(f"Application initialization failed: {exc}")
        st.stop()

    st.markdown("### Records")
    render_search_box(pager)

    columns = st.session_state["columns"]
    render_sort_headers(pager, columns)

    frame = st.session_state["frame"]
    try:
        render_table(frame["rows"], columns, pager.coercer)
    except PaginationError as exc:
        st.error(str(exc))

    if frame["navigation"] is not None:
        render_navigation(pager, frame["navigation"])


if __name__ == "__main__":
    main()
