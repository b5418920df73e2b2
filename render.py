"""Plain-text rendering of the displayed page.

Fallback literals for absent fields are applied here and nowhere else:

  place_of_origin / artist_display -> "Unknown"
  inscriptions                     -> "not defined"
  date_start / date_end            -> empty cell
"""

from __future__ import annotations

from collections.abc import Sequence

from models import Artwork
from page_view import RowView

UNKNOWN = "Unknown"
NOT_DEFINED = "not defined"
MAX_CELL_WIDTH = 40

# (header, column width)
COLUMNS: list[tuple[str, int]] = [
    ("Title", 32),
    ("Place of Origin", 16),
    ("Artist Display", MAX_CELL_WIDTH),
    ("Inscriptions", 24),
    ("Date Start", 10),
    ("Date End", 8),
]


def display_values(record: Artwork) -> list[str]:
    """Return the cell values of one record in column order."""
    return [
        record.title,
        record.place_of_origin or UNKNOWN,
        record.artist_display or UNKNOWN,
        record.inscriptions or NOT_DEFINED,
        "" if record.date_start is None else str(record.date_start),
        "" if record.date_end is None else str(record.date_end),
    ]


def checkbox(checked: bool) -> str:
    return "[x]" if checked else "[ ]"


def render_page(rows: Sequence[RowView], all_selected: bool) -> str:
    """Render rows as a fixed-width table with a select-all header box."""
    header_cells = [checkbox(all_selected)] + [_fit(name, width) for name, width in COLUMNS]
    lines = [" | ".join(header_cells)]
    lines.append("-+-".join("-" * len(cell) for cell in header_cells))

    for row in rows:
        values = display_values(row.record)
        cells = [checkbox(row.checked)] + [
            _fit(value, width) for value, (_, width) in zip(values, COLUMNS)
        ]
        lines.append(" | ".join(cells))

    if not rows:
        lines.append("(no records)")
    return "\n".join(lines)


def render_summary(
    page_index: int,
    page_size: int,
    total_count: int,
    selected_count: int,
) -> str:
    """One-line pagination and selection summary."""
    page_count = -(-total_count // page_size) if total_count else 0
    offset = page_index * page_size
    if offset < total_count:
        first, last = offset + 1, min(offset + page_size, total_count)
    else:
        # past the end of the catalog
        first = last = 0
    return (
        f"Page {page_index + 1}/{page_count} "
        f"(records {first}-{last} of {total_count}); selected: {selected_count}"
    )


def _fit(value: str, width: int) -> str:
    # one line per row: collapse embedded newlines from artist_display
    text = " ".join(value.split())
    if len(text) > width:
        text = text[: width - 3] + "..."
    return text.ljust(width)
