"""Page navigation bar component."""

from __future__ import annotations

import streamlit as st

from record_pager.config import COUNTER_TEXT
from record_pager.services.page_window import PageEntry
from record_pager.services.pagination_state import NavigationView, PaginationState


def page_label(entry: PageEntry) -> str:
    """Return the button text for a window entry."""
    return "…" if entry.is_ellipsis else str(entry.number)


def _on_limit_change(pager: PaginationState, key: str) -> None:
    pager.set_limit(st.session_state[key])


def render_navigation(pager: PaginationState, view: NavigationView) -> None:
    """Render the results counter, page buttons and the limiter."""
    key = f"nav-{pager.widget_id}"
    st.caption(f"{view.total_results} {COUNTER_TEXT}")

    window = view.window
    if window is not None:
        slots = st.columns(len(window.entries) + 2)
        with slots[0]:
            if window.show_back:
                st.button("‹", key=f"{key}-back", on_click=pager.previous_page)
        for position, entry in enumerate(window.entries, start=1):
            with slots[position]:
                if entry.is_ellipsis:
                    st.button(page_label(entry), key=f"{key}-gap-{position}", disabled=True)
                    continue
                st.button(
                    page_label(entry),
                    key=f"{key}-page-{entry.number}",
                    type="primary" if entry.active else "secondary",
                    on_click=pager.go_to_page,
                    args=(entry.number,),
                )
        with slots[-1]:
            if window.show_forward:
                st.button("›", key=f"{key}-forward", on_click=pager.next_page)

    if view.show_limiter:
        limit_key = f"{key}-limit"
        options = list(view.limit_options)
        st.selectbox(
            "Show:",
            options=options,
            index=options.index(view.limit),
            key=limit_key,
            format_func=lambda value: f"{value} {view.limit_text}",
            on_change=_on_limit_change,
            args=(pager, limit_key),
        )
