"""
Admin dashboard data grid.

Supplies the posts grid with its records (flattened posts) and column schema.
Records are built once per call; selections key on the post id so they
survive a reload of the collection.
"""

from __future__ import annotations

from typing import Any

from backend import config
from backend.mock_data import load_posts
from backend.models.posts import Post
from engine.grid import Column, GridController, GridOptions, numeric_compare


def post_row(post: Post) -> dict[str, Any]:
    """Flatten one post into a grid record."""
    return {
        "id": post.id,
        "title": post.title,
        "author": post.author.name,
        "category": post.category.name,
        "tags": ", ".join(t.name for t in post.tags),
        "views": post.views,
        "likes": post.likes,
        "readTime": post.read_time,
        "publishedAt": post.published_at,
        "isFeatured": post.is_featured,
    }


POST_COLUMNS: list[Column[dict[str, Any]]] = [
    Column(key="title", header="Title", sortable=True, filterable=True),
    Column(key="author", header="Author", sortable=True, filterable=True),
    Column(key="category", header="Category", sortable=True, filterable=True),
    Column(key="views", header="Views", sortable=True, compare=numeric_compare),
    Column(key="likes", header="Likes", sortable=True, compare=numeric_compare),
    Column(key="publishedAt", header="Published", sortable=True, render=lambda v, row: (v or "")[:10]),
    Column(
        key="isFeatured",
        header="Featured",
        render=lambda v, row: "★" if v else "",
    ),
]


def post_rows(posts: list[Post] | None = None) -> list[dict[str, Any]]:
    return [post_row(p) for p in (posts if posts is not None else load_posts())]


def make_posts_grid(posts: list[Post] | None = None, **listeners: Any) -> GridController[dict[str, Any]]:
    """A fully featured posts grid: search, sort, filters, selection, paging."""
    options = GridOptions(
        sortable=True,
        filterable=True,
        selectable=True,
        pagination=True,
        search=True,
        page_size=config.settings.GRID_PAGE_SIZE,
    )
    return GridController(
        post_rows(posts),
        POST_COLUMNS,
        options,
        key=lambda row: row["id"],
        **listeners,
    )
