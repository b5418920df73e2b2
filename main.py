"""CLI entrypoint: browse one catalog page and apply selection commands."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from dotenv import load_dotenv

from artic_client import ArticRemoteSource
from catalog_session import DEFAULT_PAGE_SIZE, CatalogSession
from models import PaginationCursor
from render import render_page, render_summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Browse the artworks catalog and select records across pages")
    parser.add_argument("--page", type=int, default=1, help="1-based page to display")
    parser.add_argument("--page-size", type=int, default=DEFAULT_PAGE_SIZE, help="Rows per page")
    parser.add_argument(
        "--select",
        type=int,
        default=None,
        metavar="N",
        help="Select the first N records of the catalog, regardless of the displayed page",
    )
    parser.add_argument(
        "--toggle",
        type=int,
        action="append",
        default=[],
        metavar="ID",
        help="Toggle selection of one record id (repeatable)",
    )
    parser.add_argument("--select-all-page", action="store_true", help="Toggle select-all on the displayed page")
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=int(os.getenv("BULK_CHUNK_SIZE", "0")) or None,
        help="Page size used by the bulk select walk (defaults to --page-size)",
    )
    args = parser.parse_args(argv)
    if args.page < 1:
        parser.error("--page must be >= 1")
    if args.page_size < 1:
        parser.error("--page-size must be >= 1")
    if args.select is not None and args.select < 1:
        parser.error("--select must be >= 1")
    return args


async def run(args: argparse.Namespace, session: CatalogSession) -> int:
    """Apply the requested commands and print the resulting page."""
    cursor = PaginationCursor(page_index=args.page - 1, page_size=args.page_size)
    navigation = await session.on_page_change(cursor)
    exit_code = 0 if navigation.ok else 1

    if args.select:
        outcome = await session.on_bulk_select_requested(args.select)
        if outcome.ok:
            logging.info(
                "Selected first %s catalog records (%s new, %s page fetches)%s",
                outcome.merged,
                outcome.newly_selected,
                outcome.pages_fetched,
                " - catalog exhausted" if outcome.exhausted else "",
            )
        else:
            exit_code = 1
            logging.error(
                "Bulk select failed after %s page fetches; nothing merged: %s",
                outcome.pages_fetched,
                outcome.error,
            )

    for record_id in args.toggle:
        session.on_row_toggle(record_id)

    if args.select_all_page:
        session.on_select_all_toggle()

    print(render_page(session.rows, session.all_selected))
    print(render_summary(session.cursor.page_index, session.cursor.page_size, session.total_count, session.selected_count))
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Initialize config and run one browse session."""
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    args = parse_args(argv)
    session = CatalogSession(ArticRemoteSource(), page_size=args.page_size, chunk_size=args.chunk_size)
    return asyncio.run(run(args, session))


if __name__ == "__main__":
    raise SystemExit(main())
