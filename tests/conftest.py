from __future__ import annotations

from collections.abc import Iterable

import pytest

from errors import NetworkError
from models import Artwork, Page


class FakeCatalogSource:
    """In-memory catalog with ids 1..total in catalog order."""

    def __init__(
        self,
        total: int,
        fail_on_pages: Iterable[int] = (),
        reported_total: int | None = None,
    ) -> None:
        self.total = total
        self.reported_total = total if reported_total is None else reported_total
        self.fail_on_pages = set(fail_on_pages)
        self.calls: list[tuple[int, int, tuple[str, ...]]] = []

    async def fetch_page(self, page: int, page_size: int, fields: Iterable[str]) -> Page:
        self.calls.append((page, page_size, tuple(fields)))
        if page in self.fail_on_pages:
            raise NetworkError(f"simulated timeout on page {page}")
        start = (page - 1) * page_size + 1
        stop = min(start + page_size - 1, self.total)
        records = tuple(Artwork(id=i, title=f"Artwork {i}") for i in range(start, stop + 1))
        return Page(records=records, total_count=self.reported_total)

    @property
    def pages_requested(self) -> list[int]:
        return [page for page, _, _ in self.calls]


@pytest.fixture
def make_source():
    return FakeCatalogSource
