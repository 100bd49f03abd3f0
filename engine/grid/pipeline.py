"""
MastroHUB Grid — Derivation Pipeline

Pure function: (source, query, sort, page, ...) → GridWindow
No side effects. No IO. Deterministic.

    search filter → column filters → stable sort → page slice

The window is recomputed from scratch whenever an input changes, so it can
never go stale. The individual stages are public so the controller can cache
them and the posts API can reuse the pagination math.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from engine.grid.comparator import sort_rows
from engine.grid.matcher import matches, matches_filters
from engine.grid.types import R, GridWindow, SortDirection, ValueCompare

# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def filter_rows(
    source: Sequence[R],
    query: str,
    filters: Mapping[str, str] | None = None,
) -> list[R]:
    """Free-text search, then column filters (AND). Order is preserved."""
    rows = [row for row in source if matches(row, query)] if query else list(source)
    if filters and any(filters.values()):
        rows = [row for row in rows if matches_filters(row, filters)]
    return rows


def page_count(count: int, page_size: int) -> int:
    """ceil(count / page_size); 0 when there is nothing to show."""
    if count <= 0:
        return 0
    return math.ceil(count / page_size)


def page_window(rows: Sequence[R], page: int, page_size: int) -> list[R]:
    """
    Rows [(page-1)*page_size, page*page_size) clipped to len(rows).

    Out-of-range pages (including page < 1) yield []. No wraparound, no clamping.
    """
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(rows[start : start + page_size])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def derive(
    source: Sequence[R],
    query: str,
    field: str | None,
    direction: SortDirection,
    page: int,
    page_size: int,
    *,
    sortable: bool,
    searchable: bool,
    paginate: bool = True,
    filters: Mapping[str, str] | None = None,
    value_compare: ValueCompare | None = None,
) -> GridWindow[R]:
    """
    Derive the visible window from the full source collection.

    With pagination off the window is the whole collection and total_pages is 1.
    """
    filtered = filter_rows(source, query if searchable else "", filters)
    ordered = sort_stage(filtered, field, direction, sortable=sortable, value_compare=value_compare)
    return paginate_stage(ordered, page, page_size, paginate=paginate)


def sort_stage(
    rows: list[R],
    field: str | None,
    direction: SortDirection,
    *,
    sortable: bool,
    value_compare: ValueCompare | None = None,
) -> list[R]:
    """Stable sort on `field`, or pass-through when sorting is off or no field is active."""
    if not sortable or field is None:
        return rows
    return sort_rows(rows, field, direction, value_compare)


def paginate_stage(rows: list[R], page: int, page_size: int, *, paginate: bool) -> GridWindow[R]:
    """Slice one page out of the ordered rows."""
    if not paginate:
        return GridWindow(
            rows=list(rows),
            total_pages=1,
            total_count=len(rows),
            page=1,
            page_size=page_size,
        )
    return GridWindow(
        rows=page_window(rows, page, page_size),
        total_pages=page_count(len(rows), page_size),
        total_count=len(rows),
        page=page,
        page_size=page_size,
    )
