"""
MastroHUB Grid — Comparator

Orders two records by one field and a direction.

  compare(a, b, field, direction) → -1 | 0 | 1

Values compare by their text form, so "10" sorts before "2". Columns that
need numeric or date ordering pass a `value_compare` override instead.
Absent values (missing key or None) always sort last, in both directions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import cmp_to_key
from typing import Any

from engine.grid.types import R, SortDirection, ValueCompare, to_text


def text_order(a: str, b: str) -> int:
    """
    Same-locale text ordering: case-insensitive first, lower-case before
    upper-case on ties, then code points.
    """
    ka = (a.lower(), a.swapcase())
    kb = (b.lower(), b.swapcase())
    return (ka > kb) - (ka < kb)


def compare(
    a: Mapping[str, Any],
    b: Mapping[str, Any],
    field: str,
    direction: SortDirection = "asc",
    value_compare: ValueCompare | None = None,
) -> int:
    """Compare two records on `field`. Descending negates present-value results only."""
    a_val = a.get(field)
    b_val = b.get(field)

    if a_val == b_val:
        return 0
    if a_val is None:
        return 1
    if b_val is None:
        return -1

    if value_compare is not None:
        result = value_compare(a_val, b_val)
        result = (result > 0) - (result < 0)
    else:
        result = text_order(to_text(a_val), to_text(b_val))

    return result if direction == "asc" else -result


def sort_rows(
    rows: Iterable[R],
    field: str,
    direction: SortDirection = "asc",
    value_compare: ValueCompare | None = None,
) -> list[R]:
    """Stable sort: rows that compare equal keep their incoming order."""
    return sorted(rows, key=cmp_to_key(lambda a, b: compare(a, b, field, direction, value_compare)))


def numeric_compare(a: Any, b: Any) -> int:
    """
    Column override ordering by magnitude. Values that are not numbers fall back
    to text ordering after all numbers.
    """
    a_num = _as_number(a)
    b_num = _as_number(b)
    if a_num is not None and b_num is not None:
        return (a_num > b_num) - (a_num < b_num)
    if a_num is not None:
        return -1
    if b_num is not None:
        return 1
    return text_order(to_text(a), to_text(b))


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None
