"""
MastroHUB Grid — Selection Tracker

The set of rows the user has ticked. Independent of search, sort and paging:
only explicit toggles and bulk select/clear change it.

Membership is by key. Pass a `key` extractor (e.g. lambda row: row["id"]) so
selections survive a source collection that is rebuilt with fresh records.
Without one, the record's identity (`id()`) is the key, which only holds while
the caller keeps handing back the same record objects.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Generic

from engine.grid.types import KeyFn, R


class SelectionTracker(Generic[R]):
    """Insertion-ordered set of selected records, keyed by `key(record)`."""

    def __init__(self, key: KeyFn | None = None):
        self._key: KeyFn = key if key is not None else id
        # key -> most recently seen record for that key
        self._selected: dict[Hashable, R] = {}

    def key_of(self, record: R) -> Hashable:
        return self._key(record)

    def is_selected(self, record: R) -> bool:
        return self._key(record) in self._selected

    def toggle(self, record: R) -> bool:
        """
        Flip membership of `record`. Returns True if it is selected afterwards.
        Records outside the current view are accepted.
        """
        k = self._key(record)
        if k in self._selected:
            del self._selected[k]
            return False
        self._selected[k] = record
        return True

    def select(self, record: R) -> None:
        self._selected[self._key(record)] = record

    def deselect(self, record: R) -> None:
        self._selected.pop(self._key(record), None)

    def select_all(self, candidates: Iterable[R]) -> None:
        """
        Replace the selection with exactly `candidates`.

        Callers pass the currently visible rows, never the unfiltered source,
        so "select all" means "select everything on this page".
        """
        self._selected = {self._key(row): row for row in candidates}

    def clear(self) -> None:
        self._selected.clear()

    def all_selected(self, candidates: Iterable[R]) -> bool:
        """True if `candidates` is non-empty and every one of them is selected."""
        seen = False
        for row in candidates:
            seen = True
            if self._key(row) not in self._selected:
                return False
        return seen

    @property
    def selected_rows(self) -> list[R]:
        return list(self._selected.values())

    @property
    def selected_keys(self) -> list[Hashable]:
        return list(self._selected.keys())

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, record: object) -> bool:
        return self._key(record) in self._selected

    def __repr__(self) -> str:
        return f"SelectionTracker({len(self._selected)} selected)"
