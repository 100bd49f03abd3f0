"""Magazine posts listing — GET /api/posts."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from backend.mock_data import fallback_posts, load_posts
from backend.models.posts import Pagination, Post, PostList, PostListEnvelope, PostListQuery
from engine.grid.pipeline import page_count, page_window

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["posts"])


def filter_posts(posts: list[Post], query: PostListQuery) -> list[Post]:
    """Apply the listing filters in order: category, tag, search, featured, author."""
    filtered = list(posts)

    if query.category:
        filtered = [p for p in filtered if p.category.slug == query.category]

    if query.tag:
        filtered = [p for p in filtered if any(t.slug == query.tag for t in p.tags)]

    if query.search:
        needle = query.search.lower()
        filtered = [
            p
            for p in filtered
            if needle in p.title.lower() or needle in p.excerpt.lower() or needle in p.content.lower()
        ]

    if query.featured is not None:
        filtered = [p for p in filtered if p.is_featured == query.featured]

    if query.author:
        filtered = [p for p in filtered if p.author.id == query.author]

    return filtered


def paginate_posts(posts: list[Post], page: int, limit: int) -> PostList:
    total_pages = page_count(len(posts), limit)
    return PostList(
        items=page_window(posts, page, limit),
        pagination=Pagination(
            page=page,
            limit=limit,
            total=len(posts),
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        ),
    )


def fallback_envelope(message: str) -> PostListEnvelope:
    posts = [Post.model_validate(p) for p in fallback_posts()]
    return PostListEnvelope(data=paginate_posts(posts, 1, 10), message=message)


@router.get("/posts")
async def list_posts(request: Request) -> PostListEnvelope:
    """
    List published posts with filtering and pagination.

    Never fails: invalid query parameters or an empty result fall back to the
    welcome post so the homepage always has something to render.
    """
    try:
        query = PostListQuery.model_validate(dict(request.query_params))
    except ValidationError as e:
        logger.warning("posts: invalid query parameters, using defaults: %s", e.errors())
        return fallback_envelope("Posts retrieved with fallback data")

    posts = load_posts()
    filtered = filter_posts(posts, query)
    if not filtered:
        filtered = [Post.model_validate(p) for p in fallback_posts()]

    return PostListEnvelope(
        data=paginate_posts(filtered, query.page, query.limit),
        message="Posts retrieved successfully",
    )
