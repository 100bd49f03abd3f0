"""
Seed content for the magazine API and the admin posts grid.

Posts are stored as camelCase dicts (the wire shape) and validated into
`Post` models by `load_posts()`.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from backend.models.posts import Post

_IMAGE = "/images/placeholders/molecular-gastronomy.svg"
_AVATAR = "/images/placeholders/avatar-default.svg"

SECTIONS: list[dict[str, Any]] = [
    {
        "id": "550e8400-e29b-41d4-a716-446655440001",
        "name": "Fine Dining",
        "slug": "fine-dining",
        "description": "Exclusive culinary experiences and haute cuisine",
        "icon": "🍽️",
        "color": "#8B4513",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440002",
        "name": "Street Food",
        "slug": "street-food",
        "description": "Authentic street food from around the world",
        "icon": "🌮",
        "color": "#FF6B35",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440003",
        "name": "Wine & Spirits",
        "slug": "wine-spirits",
        "description": "Wine tasting, cocktail culture, and spirits",
        "icon": "🍷",
        "color": "#722F37",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440004",
        "name": "Hotel Management",
        "slug": "hotel-management",
        "description": "Hospitality industry insights and best practices",
        "icon": "🏨",
        "color": "#2E86AB",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440005",
        "name": "Chef Interviews",
        "slug": "chef-interviews",
        "description": "Exclusive interviews with world-renowned chefs",
        "icon": "👨‍🍳",
        "color": "#A23B72",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440006",
        "name": "Food Trends",
        "slug": "food-trends",
        "description": "Latest culinary trends and innovations",
        "icon": "🚀",
        "color": "#F18F01",
    },
]

TAGS: list[dict[str, Any]] = [
    {"id": "550e8400-e29b-41d4-a716-446655440101", "name": "Italian Cuisine", "slug": "italian-cuisine", "color": "#CD853F"},
    {"id": "550e8400-e29b-41d4-a716-446655440102", "name": "Asian Fusion", "slug": "asian-fusion", "color": "#DC143C"},
    {"id": "550e8400-e29b-41d4-a716-446655440103", "name": "Sustainable Dining", "slug": "sustainable-dining", "color": "#228B22"},
    {"id": "550e8400-e29b-41d4-a716-446655440104", "name": "Cocktail Culture", "slug": "cocktail-culture", "color": "#FF69B4"},
    {"id": "550e8400-e29b-41d4-a716-446655440105", "name": "Luxury Hospitality", "slug": "luxury-hospitality", "color": "#FFD700"},
    {"id": "550e8400-e29b-41d4-a716-446655440106", "name": "Food Photography", "slug": "food-photography", "color": "#9932CC"},
]


def _post(
    post_id: str,
    title: str,
    slug: str,
    excerpt: str,
    topic: str,
    published_at: str,
    *,
    read_time: int,
    views: int,
    likes: int,
    featured: bool,
    section: int,
    tags: list[int],
    author: tuple[str, str, str],
) -> dict[str, Any]:
    author_id, author_name, bio = author
    return {
        "id": post_id,
        "title": title,
        "slug": slug,
        "excerpt": excerpt,
        "content": f"Full article content about {topic}...",
        "featuredImage": _IMAGE,
        "publishedAt": published_at,
        "updatedAt": published_at,
        "readTime": read_time,
        "views": views,
        "likes": likes,
        "isFeatured": featured,
        "isPublished": True,
        "category": SECTIONS[section],
        "tags": [TAGS[i] for i in tags],
        "author": {"id": author_id, "name": author_name, "avatar": _AVATAR, "bio": bio},
    }


POSTS: list[dict[str, Any]] = [
    _post(
        "1",
        "The Art of Molecular Gastronomy: Breaking Boundaries in Modern Cuisine",
        "molecular-gastronomy-modern-cuisine",
        "Explore the fascinating world of molecular gastronomy where science meets culinary artistry. "
        "Discover how top chefs are pushing the boundaries of traditional cooking.",
        "molecular gastronomy",
        "2024-01-15T10:00:00Z",
        read_time=8,
        views=15670,
        likes=892,
        featured=True,
        section=5,
        tags=[1, 5],
        author=("author-1", "Chef Marco Rossi", "Award-winning chef and culinary innovator"),
    ),
    _post(
        "2",
        "Sustainable Dining: How Restaurants Are Embracing Eco-Friendly Practices",
        "sustainable-dining-eco-friendly-restaurants",
        "From farm-to-table initiatives to zero-waste kitchens, discover how restaurants worldwide "
        "are leading the charge in sustainable dining practices.",
        "sustainable dining",
        "2024-01-14T14:30:00Z",
        read_time=6,
        views=12350,
        likes=756,
        featured=False,
        section=5,
        tags=[2],
        author=("author-2", "Sarah Chen", "Food sustainability expert and journalist"),
    ),
    _post(
        "3",
        "Wine Pairing Masterclass: Elevate Your Dining Experience",
        "wine-pairing-masterclass-dining-experience",
        "Master the art of wine pairing with expert tips from sommeliers. "
        "Learn how to enhance your dining experience with perfect wine selections.",
        "wine pairing",
        "2024-01-13T16:45:00Z",
        read_time=7,
        views=9870,
        likes=634,
        featured=False,
        section=2,
        tags=[3],
        author=("author-3", "Pierre Dubois", "Master sommelier and wine educator"),
    ),
    _post(
        "4",
        "Street Food Revolution: Global Flavors on the Go",
        "street-food-revolution-global-flavors",
        "From Bangkok to Mexico City, explore the world's most exciting street food scenes "
        "and the cultural stories behind these beloved dishes.",
        "street food",
        "2024-01-12T11:20:00Z",
        read_time=5,
        views=8760,
        likes=523,
        featured=False,
        section=1,
        tags=[0, 1],
        author=("author-4", "Maria Gonzalez", "Street food explorer and travel writer"),
    ),
    _post(
        "5",
        "Luxury Hotel Management: Secrets of Five-Star Service",
        "luxury-hotel-management-five-star-service",
        "Discover the behind-the-scenes secrets of luxury hotel management and how top "
        "establishments maintain their prestigious five-star standards.",
        "luxury hotel management",
        "2024-01-11T09:15:00Z",
        read_time=9,
        views=11230,
        likes=678,
        featured=False,
        section=3,
        tags=[4],
        author=("author-5", "James Thompson", "Hospitality consultant and former hotel director"),
    ),
    _post(
        "6",
        "Chef's Table: Exclusive Interview with Michelin-Starred Chef Elena Rodriguez",
        "chefs-table-interview-elena-rodriguez",
        "An intimate conversation with Chef Elena Rodriguez about her journey to culinary "
        "excellence and the philosophy behind her innovative dishes.",
        "Chef Elena Rodriguez",
        "2024-01-10T13:00:00Z",
        read_time=10,
        views=13450,
        likes=945,
        featured=True,
        section=4,
        tags=[0, 5],
        author=("author-6", "David Kim", "Culinary journalist and interviewer"),
    ),
]


def fallback_posts() -> list[dict[str, Any]]:
    """The single welcome post served when the real listing can't be produced."""
    now = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
    return [
        {
            "id": "fallback-1",
            "title": "Welcome to MastroHUB",
            "slug": "welcome-mastrohub",
            "excerpt": "Your premier destination for gastronomy and hospitality insights",
            "content": "Welcome to MastroHUB, where culinary excellence meets hospitality innovation...",
            "featuredImage": "/images/placeholders/hero-gastronomy.jpg",
            "author": {
                "id": "fallback-author",
                "name": "MastroHUB Team",
                "avatar": "/images/placeholders/avatar-default.jpg",
                "bio": "Your trusted source for gastronomy insights",
            },
            "category": {
                "id": "fallback-category",
                "name": "General",
                "slug": "general",
                "description": "General gastronomy content",
                "icon": "🍽️",
            },
            "tags": [
                {
                    "id": "fallback-tag",
                    "name": "Welcome",
                    "slug": "welcome",
                    "color": "#8B4513",
                    "description": "Welcome content",
                }
            ],
            "publishedAt": now,
            "updatedAt": now,
            "readTime": 3,
            "views": 100,
            "likes": 10,
            "isFeatured": True,
            "isPublished": True,
        }
    ]


def load_posts() -> list[Post]:
    return [Post.model_validate(p) for p in POSTS]
