"""Host-facing entry points wiring the view, the store and bulk selection.

A rendering layer calls the ``on_*`` handlers and reads the observables.
All calls are expected from one event loop. Overlapping ``on_page_change``
and ``on_bulk_select_requested`` calls are not guarded, and a stale fetch
that completes late is still applied.
"""

from __future__ import annotations

import os

from artic_client import RemoteSource
from bulk_selector import BulkSelectOutcome, BulkSelector
from models import PaginationCursor
from page_view import NavigationOutcome, PageViewController, RowView
from selection_store import SelectionStore

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "12"))


def cursor_from_page_event(first: int, rows: int, page: int | None = None) -> PaginationCursor:
    """Translate a paginator event (row offset, rows per page, optional page)."""
    if rows <= 0:
        raise ValueError(f"rows must be > 0, got {rows}")
    page_index = page if page else first // rows
    return PaginationCursor(page_index=page_index, page_size=rows)


class CatalogSession:
    def __init__(
        self,
        source: RemoteSource,
        page_size: int = DEFAULT_PAGE_SIZE,
        chunk_size: int | None = None,
        store: SelectionStore | None = None,
    ) -> None:
        self.store = store if store is not None else SelectionStore()
        self.view = PageViewController(source, self.store, PaginationCursor(0, page_size))
        self.source = source
        self.chunk_size = chunk_size

    async def on_page_change(self, cursor: PaginationCursor) -> NavigationOutcome:
        return await self.view.navigate(cursor)

    def on_row_toggle(self, record_id: int) -> bool:
        return self.view.toggle_row(record_id)

    def on_select_all_toggle(self) -> bool:
        return self.view.toggle_select_all_on_page()

    async def on_bulk_select_requested(self, n: int) -> BulkSelectOutcome:
        # the walk is chunked by the view's current page size unless overridden
        selector = BulkSelector(self.source, self.store, self.chunk_size or self.view.cursor.page_size)
        return await selector.select_count(n)

    @property
    def cursor(self) -> PaginationCursor:
        return self.view.cursor

    @property
    def rows(self) -> tuple[RowView, ...]:
        return self.view.rows

    @property
    def all_selected(self) -> bool:
        return self.view.all_selected

    @property
    def loading(self) -> bool:
        return self.view.loading

    @property
    def total_count(self) -> int:
        return self.view.total_count

    @property
    def selected_count(self) -> int:
        return len(self.store)
