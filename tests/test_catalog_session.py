"""Tests for the host-facing handlers (catalog_session.CatalogSession)."""

from __future__ import annotations

import asyncio

import pytest

from catalog_session import CatalogSession, cursor_from_page_event
from models import PaginationCursor


def test_cursor_from_page_event_prefers_page_then_offset() -> None:
    assert cursor_from_page_event(first=24, rows=12, page=2) == PaginationCursor(2, 12)
    assert cursor_from_page_event(first=24, rows=12) == PaginationCursor(2, 12)
    assert cursor_from_page_event(first=0, rows=12, page=0) == PaginationCursor(0, 12)


def test_cursor_from_page_event_rejects_zero_rows() -> None:
    with pytest.raises(ValueError):
        cursor_from_page_event(first=0, rows=0)


def test_bulk_select_refreshes_displayed_page_flag(make_source) -> None:
    session = CatalogSession(make_source(total=100), page_size=12)
    asyncio.run(session.on_page_change(PaginationCursor(1, 12)))
    assert session.all_selected is False

    outcome = asyncio.run(session.on_bulk_select_requested(25))

    assert outcome.ok
    assert session.all_selected is True
    assert session.selected_count == 25
    assert all(row.checked for row in session.rows)


def test_bulk_select_walks_from_first_page_regardless_of_cursor(make_source) -> None:
    source = make_source(total=100)
    session = CatalogSession(source, page_size=12)
    asyncio.run(session.on_page_change(PaginationCursor(5, 12)))

    asyncio.run(session.on_bulk_select_requested(5))

    assert source.pages_requested == [6, 1]
    assert session.all_selected is False


def test_bulk_select_uses_current_page_size_unless_chunk_size_given(make_source) -> None:
    source = make_source(total=100)
    session = CatalogSession(source, page_size=12)
    asyncio.run(session.on_page_change(PaginationCursor(0, 25)))
    asyncio.run(session.on_bulk_select_requested(30))
    assert [size for _, size, _ in source.calls[1:]] == [25, 25]

    source = make_source(total=100)
    session = CatalogSession(source, page_size=12, chunk_size=100)
    asyncio.run(session.on_bulk_select_requested(30))
    assert [size for _, size, _ in source.calls] == [100]


def test_row_and_select_all_handlers_update_observables(make_source) -> None:
    session = CatalogSession(make_source(total=20), page_size=12)
    asyncio.run(session.on_page_change(PaginationCursor(1, 12)))

    assert session.total_count == 20
    assert len(session.rows) == 8

    session.on_row_toggle(13)
    assert session.selected_count == 1

    assert session.on_select_all_toggle() is True
    assert session.selected_count == 8
    assert session.on_select_all_toggle() is False
    assert session.selected_count == 0
    assert session.loading is False


def test_failed_bulk_select_leaves_selection_untouched(make_source) -> None:
    source = make_source(total=100, fail_on_pages={2})
    session = CatalogSession(source, page_size=12)
    asyncio.run(session.on_page_change(PaginationCursor(0, 12)))
    session.on_row_toggle(7)

    outcome = asyncio.run(session.on_bulk_select_requested(20))

    assert not outcome.ok
    assert outcome.merged == 0
    assert session.selected_count == 1
