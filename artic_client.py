"""Art Institute of Chicago artworks API: one-page fetch adapter."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable
from typing import Any, Protocol

import requests

from errors import NetworkError, ParseError
from models import Artwork, Page

ARTIC_API_URL = os.getenv("ARTIC_API_URL", "https://api.artic.edu/api/v1/artworks")
REQUEST_TIMEOUT_SECONDS = float(os.getenv("ARTIC_TIMEOUT_SECONDS", "20"))

DEFAULT_FIELDS: tuple[str, ...] = (
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)
ID_ONLY_FIELDS: tuple[str, ...] = ("id",)

LOGGER = logging.getLogger(__name__)


class RemoteSource(Protocol):
    """Anything that can return one page of the catalog."""

    async def fetch_page(self, page: int, page_size: int, fields: Iterable[str]) -> Page:
        ...


class ArticRemoteSource:
    """Fetches catalog pages over HTTP.

    No retries are performed here; a failed request surfaces as
    ``NetworkError`` and the caller decides what to do with it.
    """

    def __init__(
        self,
        base_url: str = ARTIC_API_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session = session

    async def fetch_page(self, page: int, page_size: int, fields: Iterable[str]) -> Page:
        """Fetch one page (1-based ``page``) projected to ``fields``."""
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        params = {
            "page": page,
            "limit": page_size,
            "fields": ",".join(_ordered_fields(fields)),
        }
        payload = await asyncio.to_thread(self._get_json, params)
        parsed = _parse_page_payload(payload)

        LOGGER.info(
            "ARTIC fetch: page=%s limit=%s records=%s total=%s",
            page,
            page_size,
            len(parsed.records),
            parsed.total_count,
        )
        return parsed

    def _get_json(self, params: dict[str, Any]) -> Any:
        getter = self.session.get if self.session is not None else requests.get
        try:
            response = getter(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkError(f"ARTIC request failed for params={params}: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(f"ARTIC response is not valid JSON for params={params}") from exc


def _ordered_fields(fields: Iterable[str]) -> list[str]:
    """Deduplicate while keeping ``id`` first so every projection can be keyed."""
    ordered: list[str] = ["id"]
    for field in fields:
        if field not in ordered:
            ordered.append(field)
    return ordered


def _parse_page_payload(payload: Any) -> Page:
    """Parse an API payload into a ``Page``.

    Raises ParseError when the envelope is malformed. Entries without an
    integer ``id`` are dropped rather than failing the page.
    """
    if not isinstance(payload, dict):
        raise ParseError("Unexpected ARTIC payload shape: expected an object")

    data = payload.get("data")
    if not isinstance(data, list):
        raise ParseError("Unexpected ARTIC payload shape: 'data' must be a list")

    pagination = payload.get("pagination")
    total = pagination.get("total") if isinstance(pagination, dict) else None
    if not isinstance(total, int) or isinstance(total, bool):
        raise ParseError("Unexpected ARTIC payload shape: 'pagination.total' must be an integer")

    records: list[Artwork] = []
    dropped = 0
    for item in data:
        record = _parse_artwork(item)
        if record is None:
            dropped += 1
            continue
        records.append(record)

    if dropped:
        LOGGER.debug("ARTIC parse: dropped %s entries without an id", dropped)

    return Page(records=tuple(records), total_count=total)


def _parse_artwork(item: Any) -> Artwork | None:
    if not isinstance(item, dict):
        return None

    artwork_id = item.get("id")
    if not isinstance(artwork_id, int) or isinstance(artwork_id, bool):
        return None

    return Artwork(
        id=artwork_id,
        title=_as_str(item.get("title")) or "",
        place_of_origin=_as_str(item.get("place_of_origin")),
        artist_display=_as_str(item.get("artist_display")),
        inscriptions=_as_str(item.get("inscriptions")),
        date_start=_as_int(item.get("date_start")),
        date_end=_as_int(item.get("date_end")),
    )


def _as_str(value: Any) -> str | None:
    return value.strip() if isinstance(value, str) and value.strip() else None


def _as_int(value: Any) -> int | None:
    # date_start/date_end are years; 0 is a real value, unlike the empty string
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None
