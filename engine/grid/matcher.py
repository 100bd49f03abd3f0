"""
MastroHUB Grid — Row Matcher

Pure predicates deciding whether a record survives the free-text search
and the per-column filters. Simple lower-casing, plain substring test.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from engine.grid.types import to_text


def matches(record: Mapping[str, Any], query: str) -> bool:
    """
    True if `query` is a substring of at least one field's text (case-insensitive).

    Scans every field of the record, not only displayed columns.
    An empty query matches everything.
    """
    if not query:
        return True
    needle = query.lower()
    return any(needle in to_text(value).lower() for value in record.values())


def matches_filters(record: Mapping[str, Any], filters: Mapping[str, str]) -> bool:
    """
    True if every non-empty column filter is a substring of that field's text.

    A missing field renders as "" and therefore fails any non-empty filter.
    """
    for key, text in filters.items():
        if not text:
            continue
        if text.lower() not in to_text(record.get(key)).lower():
            return False
    return True
