"""
MastroHUB Grid — Engine Controller

Stateful wrapper the dashboard binds to. Owns the raw inputs (query, column
filters, sort, page, selection, filter panel flag) and the derived window.

Every mutator applies its change and then recomputes the window before
returning, so readers never observe a half-applied state. Filtered and sorted
intermediate lists are cached by their inputs; the page slice is always
recomputed.

Not thread-safe: drive one controller from one logical thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any, Generic

from engine.grid.pipeline import filter_rows, paginate_stage, sort_stage
from engine.grid.selection import SelectionTracker
from engine.grid.types import Column, GridOptions, GridWindow, KeyFn, R, SortDirection, flip_direction

logger = logging.getLogger(__name__)

SortListener = Callable[[str, SortDirection], None]
FilterListener = Callable[[dict[str, str]], None]
SelectionListener = Callable[[list[Any]], None]


class GridController(Generic[R]):
    """
    One data grid instance.

    Initial state: empty query, no column filters, no active sort (direction
    "asc"), page 1, empty selection, filter panel hidden.
    """

    def __init__(
        self,
        data: Sequence[R],
        columns: Sequence[Column[R]] = (),
        options: GridOptions | None = None,
        *,
        key: KeyFn | None = None,
        on_sort: SortListener | None = None,
        on_filter: FilterListener | None = None,
        on_selection_change: SelectionListener | None = None,
    ):
        self.options = options or GridOptions()
        self.columns: list[Column[R]] = list(columns)
        self._columns_by_key: dict[str, Column[R]] = {c.key: c for c in self.columns}
        self._data: list[R] = list(data)
        self._data_version = 0

        self._query = ""
        self._filters: dict[str, str] = {}
        self._sort_key: str | None = None
        self._sort_direction: SortDirection = "asc"
        self._current_page = 1
        self._show_filters = False
        self._selection: SelectionTracker[R] = SelectionTracker(key)

        self._on_sort = on_sort
        self._on_filter = on_filter
        self._on_selection_change = on_selection_change

        self._filtered_cache: tuple[Hashable, list[R]] | None = None
        self._sorted_cache: tuple[Hashable, list[R]] | None = None
        self._window: GridWindow[R] = GridWindow(page_size=self.options.page_size)
        self._recompute()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def data(self) -> list[R]:
        return list(self._data)

    @property
    def query(self) -> str:
        return self._query

    @property
    def column_filters(self) -> dict[str, str]:
        return dict(self._filters)

    @property
    def sort_key(self) -> str | None:
        return self._sort_key

    @property
    def sort_direction(self) -> SortDirection:
        return self._sort_direction

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def page_size(self) -> int:
        return self.options.page_size

    @property
    def show_filters(self) -> bool:
        return self._show_filters

    @property
    def window(self) -> GridWindow[R]:
        return self._window

    @property
    def visible_rows(self) -> list[R]:
        return list(self._window.rows)

    @property
    def total_pages(self) -> int:
        return self._window.total_pages

    @property
    def total_count(self) -> int:
        return self._window.total_count

    @property
    def selection(self) -> SelectionTracker[R]:
        return self._selection

    @property
    def selected_rows(self) -> list[R]:
        return self._selection.selected_rows

    @property
    def all_visible_selected(self) -> bool:
        """State of the header checkbox."""
        return self._selection.all_selected(self._window.rows)

    @property
    def filterable_columns(self) -> list[Column[R]]:
        return [c for c in self.columns if c.filterable]

    def is_selected(self, record: R) -> bool:
        return self._selection.is_selected(record)

    def sort_indicator(self, field: str) -> str | None:
        """
        Glyph state for a column header: "asc"/"desc" on the active column,
        "none" on other sortable columns, None when sorting is off.
        """
        column = self._columns_by_key.get(field)
        if not self.options.sortable or (column is not None and not column.sortable):
            return None
        if field == self._sort_key:
            return self._sort_direction
        return "none"

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_data(self, data: Iterable[R]) -> None:
        """Replace the source collection. The selection is left as it is."""
        self._data = list(data)
        self._data_version += 1
        self._recompute()

    def set_query(self, query: str) -> None:
        """New free-text search. Goes back to the first page."""
        self._query = query or ""
        self._current_page = 1
        self._recompute()

    def set_column_filter(self, field: str, text: str) -> None:
        """
        Set (or, with empty text, remove) the filter for one column.
        Goes back to the first page and notifies on_filter.
        """
        if text:
            self._filters[field] = text
        else:
            self._filters.pop(field, None)
        self._current_page = 1
        self._recompute()
        if self._on_filter is not None:
            self._on_filter(dict(self._filters))

    def set_page(self, page: int) -> None:
        """Any page number is accepted; out-of-range pages show an empty window."""
        self._current_page = page
        self._recompute()

    def next_page(self) -> None:
        self.set_page(min(self._current_page + 1, max(self.total_pages, 1)))

    def prev_page(self) -> None:
        self.set_page(max(1, self._current_page - 1))

    def toggle_sort(self, field: str) -> None:
        """
        New field → ascending; same field → flip direction.
        Either way the first page is shown again. Ignored when sorting is off.
        """
        if not self.options.sortable:
            return

        if self._sort_key == field:
            self._sort_direction = flip_direction(self._sort_direction)
        else:
            self._sort_key = field
            self._sort_direction = "asc"
        self._current_page = 1
        self._recompute()
        logger.debug("grid: sort %s %s", field, self._sort_direction)

        if self._on_sort is not None:
            self._on_sort(field, self._sort_direction)

    def toggle_selection(self, record: R) -> bool:
        """Flip one row's checkbox. Returns the row's new state."""
        selected = self._selection.toggle(record)
        self._notify_selection()
        return selected

    def select_all_visible(self) -> None:
        """Select exactly the rows of the current window."""
        self._selection.select_all(self._window.rows)
        self._notify_selection()

    def set_select_all(self, checked: bool) -> None:
        """Header checkbox: checked selects the visible rows, unchecked clears."""
        if checked:
            self.select_all_visible()
        else:
            self.clear_selection()

    def clear_selection(self) -> None:
        self._selection.clear()
        self._notify_selection()

    def toggle_filter_panel(self) -> None:
        """UI flag only; the window is not affected."""
        self._show_filters = not self._show_filters

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def _active_filters(self) -> dict[str, str]:
        if not self.options.filterable:
            return {}
        return {
            k: v
            for k, v in self._filters.items()
            if v and (k in self._columns_by_key and self._columns_by_key[k].filterable)
        }

    def _recompute(self) -> None:
        query = self._query if self.options.search else ""
        filters = self._active_filters()

        filter_key = (self._data_version, query, tuple(sorted(filters.items())))
        if self._filtered_cache is None or self._filtered_cache[0] != filter_key:
            self._filtered_cache = (filter_key, filter_rows(self._data, query, filters))
            self._sorted_cache = None
        filtered = self._filtered_cache[1]

        order_key = (filter_key, self._sort_key, self._sort_direction, self.options.sortable)
        if self._sorted_cache is None or self._sorted_cache[0] != order_key:
            column = self._columns_by_key.get(self._sort_key) if self._sort_key else None
            ordered = sort_stage(
                filtered,
                self._sort_key,
                self._sort_direction,
                sortable=self.options.sortable,
                value_compare=column.compare if column is not None else None,
            )
            self._sorted_cache = (order_key, ordered)
        ordered = self._sorted_cache[1]

        self._window = paginate_stage(
            ordered,
            self._current_page,
            self.options.page_size,
            paginate=self.options.pagination,
        )
        logger.debug(
            "grid: derived %d/%d rows, page %d of %d",
            len(self._window.rows),
            self._window.total_count,
            self._current_page,
            self._window.total_pages,
        )

    def _notify_selection(self) -> None:
        if self._on_selection_change is not None:
            self._on_selection_change(self._selection.selected_rows)

    def snapshot(self) -> dict[str, Any]:
        """Plain-dict view of the current state, for logging and debugging."""
        return {
            "query": self._query,
            "column_filters": dict(self._filters),
            "sort_key": self._sort_key,
            "sort_direction": self._sort_direction,
            "current_page": self._current_page,
            "page_size": self.options.page_size,
            "show_filters": self._show_filters,
            "total_pages": self._window.total_pages,
            "total_count": self._window.total_count,
            "visible_count": len(self._window.rows),
            "selected_count": len(self._selection),
        }


def make_columns(headers: Mapping[str, str], *, sortable: bool = True, filterable: bool = False) -> list[Column[Any]]:
    """Build plain columns from a {key: header} mapping."""
    return [Column(key=k, header=h, sortable=sortable, filterable=filterable) for k, h in headers.items()]
