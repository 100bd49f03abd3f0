"""Admin dashboard grid models. JSON keys are camelCase."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GridQuery(BaseModel):
    """
    Query string of GET /api/dashboard/posts.

    Any integer page is accepted; pages past the end come back empty.
    Column filters are read separately, one parameter per filterable column.
    """

    model_config = ConfigDict(extra="ignore")

    q: str = Field(default="", max_length=200)
    sort: str | None = None
    direction: Literal["asc", "desc"] = "asc"
    page: int = 1


class GridColumnOut(BaseModel):
    model_config = _CAMEL

    key: str
    header: str
    sortable: bool
    filterable: bool
    sort_indicator: str | None = None


class GridPage(BaseModel):
    """One derived window of the posts grid plus its pager figures."""

    model_config = _CAMEL

    columns: list[GridColumnOut]
    rows: list[dict[str, Any]]
    cells: list[dict[str, str]]
    total_pages: int
    total_count: int
    page: int
    page_size: int
    start_index: int
    end_index: int
    has_next: bool
    has_prev: bool
    query: str
    column_filters: dict[str, str]
    sort_key: str | None
    sort_direction: Literal["asc", "desc"]
