"""
MastroHUB Grid — the tabular data engine behind the admin data grid.

Components:
  matcher     — free-text and column-filter predicates
  comparator  — single-field, stable, text-ordered comparison
  pipeline    — (source, query, sort, page) → GridWindow  (pure, deterministic)
  selection   — key-based set of ticked rows, independent of the pipeline
  controller  — stateful unit the dashboard binds to
"""

from engine.grid.comparator import compare, numeric_compare, sort_rows
from engine.grid.controller import GridController, make_columns
from engine.grid.matcher import matches, matches_filters
from engine.grid.pipeline import derive, page_count, page_window
from engine.grid.selection import SelectionTracker
from engine.grid.types import Column, GridOptions, GridWindow, to_text

__all__ = [
    "Column",
    "GridOptions",
    "GridWindow",
    "to_text",
    "matches",
    "matches_filters",
    "compare",
    "sort_rows",
    "numeric_compare",
    "derive",
    "page_count",
    "page_window",
    "SelectionTracker",
    "GridController",
    "make_columns",
]
