"""
MastroHUB Grid — Shared Types

Data classes used across matcher, comparator, pipeline, selection and controller.
These are the contracts that bind the grid engine together.

- Records are plain mappings (field name → value). The engine never mutates them.
- Columns describe displayed fields; they never restrict free-text search.
- GridWindow is the derived state: recomputed on every change, never persisted.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

# ---------------------------------------------------------------------------
# Type variables and aliases
# ---------------------------------------------------------------------------

R = TypeVar("R", bound=Mapping[str, Any])

SortDirection = Literal["asc", "desc"]

# (a_value, b_value) -> negative / zero / positive
ValueCompare = Callable[[Any, Any], int]

# record -> stable selection key
KeyFn = Callable[[Any], Hashable]

DEFAULT_PAGE_SIZE = 10


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Column(Generic[R]):
    """
    One displayed field of the grid.

    `compare` lets a column opt out of text ordering (numeric or date columns).
    Without it, values sort by their text form.
    """

    key: str
    header: str
    sortable: bool = False
    filterable: bool = False
    width: str | None = None
    render: Callable[[Any, R], str] | None = None
    compare: ValueCompare | None = None

    def cell(self, row: R) -> str:
        """Text shown in this column's cell for `row`. Falsy values (0, False, "") show as an empty cell."""
        value = row.get(self.key)
        if self.render is not None:
            return self.render(value, row)
        if not value:
            return ""
        return to_text(value)


@dataclass(frozen=True)
class GridOptions:
    """Feature switches for one grid instance. Everything is opt-in."""

    sortable: bool = False
    filterable: bool = False
    selectable: bool = False
    pagination: bool = False
    search: bool = False
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int) or self.page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {self.page_size!r}")


@dataclass
class GridWindow(Generic[R]):
    """
    The derived state of one pipeline run: the visible rows plus pager figures.

    `total_count` is the number of rows that survived filtering, before slicing.
    """

    rows: list[R] = field(default_factory=list)
    total_pages: int = 0
    total_count: int = 0
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def start_index(self) -> int:
        """1-based index of the first visible row ("Showing X to ..."), 0 when empty."""
        if not self.rows:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        """1-based index of the last visible row, 0 when empty."""
        if not self.rows:
            return 0
        return self.start_index + len(self.rows) - 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def to_text(value: Any) -> str:
    """
    Render a field value to the text form used for matching and ordering.

    Examples:
      "Alpha"          → "Alpha"
      True             → "true"
      3.0              → "3"
      None             → ""
      {"name": "Ann"}  → '{"name":"Ann"}'
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Mapping | list | tuple):
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            # non-string keys, circular references
            return str(value)
    return str(value)


def flip_direction(direction: SortDirection) -> SortDirection:
    """asc ↔ desc"""
    return "desc" if direction == "asc" else "asc"
