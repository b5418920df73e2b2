"""Shared typed models for the catalog selection core."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Artwork:
    """Normalized catalog record as returned by the remote source.

    Optional fields stay ``None`` when the source omits them; display
    fallbacks are applied by ``render`` only.
    """

    id: int
    title: str
    place_of_origin: str | None = None
    artist_display: str | None = None
    inscriptions: str | None = None
    date_start: int | None = None
    date_end: int | None = None


@dataclass(frozen=True, slots=True)
class Page:
    """One page of records plus the catalog-wide record count."""

    records: tuple[Artwork, ...]
    total_count: int

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(record.id for record in self.records)


EMPTY_PAGE = Page(records=(), total_count=0)


@dataclass(frozen=True, slots=True)
class PaginationCursor:
    """Display-relative pagination position (0-based page index)."""

    page_index: int
    page_size: int

    def __post_init__(self) -> None:
        if self.page_index < 0:
            raise ValueError(f"page_index must be >= 0, got {self.page_index}")
        if self.page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {self.page_size}")

    @property
    def source_page(self) -> int:
        """1-based page number expected by the remote source."""
        return self.page_index + 1

    @property
    def first(self) -> int:
        return self.page_index * self.page_size
