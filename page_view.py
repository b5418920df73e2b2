"""Displayed-page state machine and selection derivation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from artic_client import DEFAULT_FIELDS, RemoteSource
from errors import CatalogError
from models import EMPTY_PAGE, Artwork, Page, PaginationCursor
from selection_store import SelectionStore

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RowView:
    """A displayed record with its checked flag as of the time it was read."""

    record: Artwork
    checked: bool


@dataclass(frozen=True, slots=True)
class NavigationOutcome:
    cursor: PaginationCursor
    error: CatalogError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PageViewController:
    """Owns the cursor, the last fetched page and the loading flag.

    State changes only through ``navigate`` and the toggle operations.
    Checked flags are never stored: ``rows`` and ``all_selected`` query the
    store on every read.
    """

    def __init__(self, source: RemoteSource, store: SelectionStore, cursor: PaginationCursor) -> None:
        self.source = source
        self.store = store
        self.cursor = cursor
        self.page: Page | None = None
        self.loading = False

    async def navigate(self, cursor: PaginationCursor) -> NavigationOutcome:
        """Fetch the page under ``cursor`` and make it the displayed page.

        On a source failure the previously displayed page and cursor are
        kept (nothing is displayed on a failed first load).
        """
        self.loading = True
        try:
            page = await self.source.fetch_page(cursor.source_page, cursor.page_size, DEFAULT_FIELDS)
        except CatalogError as exc:
            LOGGER.warning(
                "Page load failed: page_index=%s page_size=%s: %s",
                cursor.page_index,
                cursor.page_size,
                exc,
            )
            return NavigationOutcome(cursor=cursor, error=exc)
        finally:
            self.loading = False

        self.page = page
        self.cursor = cursor
        LOGGER.info(
            "Displayed page_index=%s records=%s all_selected=%s",
            cursor.page_index,
            len(page.records),
            self.all_selected,
        )
        return NavigationOutcome(cursor=cursor)

    def toggle_row(self, record_id: int) -> bool:
        return self.store.toggle(record_id)

    def toggle_select_all_on_page(self) -> bool:
        """Select or deselect every row on the displayed page.

        Only identifiers present on this page are touched.
        """
        ids = self.page_ids
        if self.all_selected:
            self.store.remove_all(ids)
        else:
            self.store.add_all(ids)
        return self.all_selected

    @property
    def all_selected(self) -> bool:
        """Every row on the displayed page is selected; True for an empty page."""
        return self.page is not None and self.store.contains_all(self.page.ids)

    @property
    def current_page(self) -> Page:
        return self.page if self.page is not None else EMPTY_PAGE

    @property
    def records(self) -> tuple[Artwork, ...]:
        return self.current_page.records

    @property
    def page_ids(self) -> tuple[int, ...]:
        return self.current_page.ids

    @property
    def rows(self) -> tuple[RowView, ...]:
        return tuple(RowView(record=r, checked=self.store.contains(r.id)) for r in self.records)

    @property
    def total_count(self) -> int:
        return self.current_page.total_count
