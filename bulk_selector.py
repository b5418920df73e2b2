"""Bulk "select the first N records in catalog order" walk."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from artic_client import ID_ONLY_FIELDS, RemoteSource
from errors import CatalogError
from selection_store import SelectionStore

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BulkSelectOutcome:
    """Result of one ``select_count`` call.

    ``selected_ids`` are the identifiers collected from the walk in catalog
    order. On failure nothing is merged and ``selected_ids`` holds what had
    been collected before the failing fetch.
    """

    requested: int
    selected_ids: tuple[int, ...]
    pages_fetched: int
    exhausted: bool
    newly_selected: int = 0
    error: CatalogError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def merged(self) -> int:
        return len(self.selected_ids) if self.ok else 0


class BulkSelector:
    """Walks the remote source from page 1 and merges the first N ids.

    Already-selected identifiers still count toward ``n``: the contract is
    "the first N catalog identifiers end up selected", not "N more".
    """

    def __init__(self, source: RemoteSource, store: SelectionStore, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {page_size}")
        self.source = source
        self.store = store
        self.page_size = page_size

    async def select_count(self, n: int) -> BulkSelectOutcome:
        if n <= 0:
            raise ValueError(f"n must be > 0, got {n}")

        remaining = n
        source_page = 1
        pages_fetched = 0
        exhausted = False
        collected: list[int] = []
        seen: set[int] = set()

        while remaining > 0:
            try:
                page = await self.source.fetch_page(source_page, self.page_size, ID_ONLY_FIELDS)
            except CatalogError as exc:
                LOGGER.warning(
                    "Bulk select aborted: requested=%s page=%s collected=%s merged=0: %s",
                    n,
                    source_page,
                    len(collected),
                    exc,
                )
                return BulkSelectOutcome(
                    requested=n,
                    selected_ids=tuple(collected),
                    pages_fetched=pages_fetched,
                    exhausted=False,
                    error=exc,
                )
            pages_fetched += 1

            if not page.records:
                exhausted = True
                break

            take = min(remaining, len(page.records))
            for record_id in page.ids[:take]:
                if record_id not in seen:
                    seen.add(record_id)
                    collected.append(record_id)
            remaining -= take
            source_page += 1

            # records without an id are dropped by the source, so a short page
            # does not mean the end; the reported total does
            if remaining > 0 and pages_fetched * self.page_size >= page.total_count:
                exhausted = True
                break

        newly_selected = sum(1 for record_id in collected if not self.store.contains(record_id))
        self.store.add_all(collected)

        LOGGER.info(
            "Bulk select: requested=%s collected=%s new=%s pages=%s exhausted=%s",
            n,
            len(collected),
            newly_selected,
            pages_fetched,
            exhausted,
        )
        return BulkSelectOutcome(
            requested=n,
            selected_ids=tuple(collected),
            pages_fetched=pages_fetched,
            exhausted=exhausted,
            newly_selected=newly_selected,
        )
