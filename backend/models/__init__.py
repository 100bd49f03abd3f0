"""
Pydantic models for MastroHUB.

All data shapes defined here. No imports from routes.
"""

from backend.models.auth import AuthError, LoginRequest, LoginResponse, LogoutResponse, SessionUser
from backend.models.dashboard import GridColumnOut, GridPage, GridQuery
from backend.models.posts import (
    Author,
    Pagination,
    Post,
    PostList,
    PostListEnvelope,
    PostListQuery,
    Section,
    Tag,
)

__all__ = [
    # Auth models
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "AuthError",
    "SessionUser",
    # Post models
    "Tag",
    "Section",
    "Author",
    "Post",
    "Pagination",
    "PostList",
    "PostListEnvelope",
    "PostListQuery",
    # Dashboard grid models
    "GridQuery",
    "GridColumnOut",
    "GridPage",
]
