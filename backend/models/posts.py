"""Post listing models for the magazine API. JSON keys are camelCase."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Tag(BaseModel):
    model_config = _CAMEL

    id: str
    name: str = Field(min_length=1, max_length=50)
    slug: str = Field(min_length=1, max_length=50, pattern=r"^[a-z0-9-]+$")
    color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    description: str | None = Field(default=None, max_length=200)


class Section(BaseModel):
    model_config = _CAMEL

    id: str
    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(min_length=1, max_length=50, pattern=r"^[a-z0-9-]+$")
    description: str = Field(min_length=10, max_length=500)
    icon: str | None = None
    color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")


class Author(BaseModel):
    model_config = _CAMEL

    id: str
    name: str = Field(min_length=1, max_length=100)
    avatar: str | None = None
    bio: str | None = Field(default=None, max_length=300)


class Post(BaseModel):
    """One magazine article."""

    model_config = _CAMEL

    id: str
    title: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=200, pattern=r"^[a-z0-9-]+$")
    excerpt: str = Field(min_length=10, max_length=500)
    content: str
    featured_image: str | None = None
    author: Author
    category: Section
    tags: list[Tag] = Field(min_length=1, max_length=10)
    published_at: str
    updated_at: str
    read_time: int = Field(ge=1, le=480)
    views: int = Field(ge=0)
    likes: int = Field(ge=0)
    is_featured: bool
    is_published: bool


class Pagination(BaseModel):
    model_config = _CAMEL

    page: int = Field(ge=1)
    limit: int = Field(ge=1, le=100)
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    has_next: bool
    has_prev: bool


class PostList(BaseModel):
    items: list[Post]
    pagination: Pagination


class PostListEnvelope(BaseModel):
    """What GET /api/posts returns. Always success, possibly fallback data."""

    success: bool = True
    data: PostList
    message: str


class PostListQuery(BaseModel):
    """Query string of GET /api/posts."""

    model_config = ConfigDict(extra="ignore")

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    category: str | None = None
    tag: str | None = None
    search: str | None = None
    featured: bool | None = None
    author: str | None = None
