"""Global, page-independent set of selected record identifiers."""

from __future__ import annotations

from collections.abc import Iterable


class SelectionStore:
    """Single source of truth for "is this record selected".

    Nothing else keeps a checked flag; views query ``contains`` on every read.
    """

    def __init__(self, ids: Iterable[int] = ()) -> None:
        self._ids: set[int] = set(ids)

    def contains(self, record_id: int) -> bool:
        return record_id in self._ids

    def toggle(self, record_id: int) -> bool:
        """Flip membership of one identifier and return the new membership."""
        if record_id in self._ids:
            self._ids.discard(record_id)
            return False
        self._ids.add(record_id)
        return True

    def add_all(self, ids: Iterable[int]) -> None:
        self._ids.update(ids)

    def remove_all(self, ids: Iterable[int]) -> None:
        self._ids.difference_update(ids)

    def contains_all(self, ids: Iterable[int]) -> bool:
        """True when every id is selected; vacuously True for no ids."""
        return all(record_id in self._ids for record_id in ids)

    def snapshot(self) -> frozenset[int]:
        return frozenset(self._ids)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)
