"""Admin posts grid: GET /api/dashboard/posts."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from backend.auth import require_session
from backend.dashboard import make_posts_grid
from backend.models.dashboard import GridColumnOut, GridPage, GridQuery
from engine.grid import GridController

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def apply_query(grid: GridController[Any], query: GridQuery, filters: Mapping[str, str]) -> None:
    """
    Replay the request's grid state onto a fresh controller.

    Search, filters and sort each go back to page 1, so the page is applied last.
    """
    grid.set_query(query.q)
    for key, text in filters.items():
        grid.set_column_filter(key, text)
    if query.sort is not None:
        grid.toggle_sort(query.sort)
        if query.direction == "desc":
            grid.toggle_sort(query.sort)
    grid.set_page(query.page)


def grid_page(grid: GridController[Any]) -> GridPage:
    window = grid.window
    return GridPage(
        columns=[
            GridColumnOut(
                key=c.key,
                header=c.header,
                sortable=c.sortable,
                filterable=c.filterable,
                sort_indicator=grid.sort_indicator(c.key),
            )
            for c in grid.columns
        ],
        rows=window.rows,
        cells=[{c.key: c.cell(row) for c in grid.columns} for row in window.rows],
        total_pages=window.total_pages,
        total_count=window.total_count,
        page=window.page,
        page_size=window.page_size,
        start_index=window.start_index,
        end_index=window.end_index,
        has_next=window.has_next,
        has_prev=window.has_prev,
        query=grid.query,
        column_filters=grid.column_filters,
        sort_key=grid.sort_key,
        sort_direction=grid.sort_direction,
    )


@router.get("/posts")
async def posts_grid(request: Request, email: str = Depends(require_session)) -> GridPage:
    """
    One window of the admin posts grid.

    Query: `q` (free-text search), `sort` + `direction`, `page`, and one
    parameter per filterable column (`title`, `author`, `category`).
    """
    try:
        query = GridQuery.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid grid query.",
        ) from e

    grid = make_posts_grid()
    if query.sort is not None and query.sort not in {c.key for c in grid.columns if c.sortable}:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown sort column: {query.sort}",
        )

    filters = {c.key: request.query_params[c.key] for c in grid.filterable_columns if request.query_params.get(c.key)}
    apply_query(grid, query, filters)
    logger.debug("dashboard: %s %s", email, grid.snapshot())
    return grid_page(grid)
