"""Shared fixtures for pager tests."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from record_pager.services.pagination_state import PaginationState


class RenderRecorder:
    """Collects every render and navigation callback invocation."""

    def __init__(self) -> None:
        self.renders: List[tuple] = []
        self.navigations: List[tuple] = []

    def render(self, rows, *params) -> None:
        self.renders.append((list(rows), params))

    def navigate(self, data, view) -> None:
        self.navigations.append((list(data), view))

    @property
    def last_rows(self) -> list:
        return self.renders[-1][0]

    @property
    def last_view(self):
        return self.navigations[-1][1]


@pytest.fixture
def people() -> List[Dict[str, Any]]:
    return [
        {"name": "Alice", "tags": {"role": "admin"}},
        {"name": "Bob", "tags": {"role": "user"}},
    ]


@pytest.fixture
def numbered_records() -> List[Dict[str, Any]]:
    return [{"id": index, "label": f"row {index}"} for index in range(1, 26)]


@pytest.fixture
def recorder() -> RenderRecorder:
    return RenderRecorder()


@pytest.fixture
def pager(numbered_records, recorder) -> PaginationState:
    return PaginationState(
        numbered_records,
        renderer=recorder.render,
        navigation_renderer=recorder.navigate,
    )
