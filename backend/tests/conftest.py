"""
Pytest configuration and fixtures for MastroHUB backend tests.
"""

from __future__ import annotations

import os

# Set test environment variables before importing config
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-testing-only")

import httpx  # noqa: E402
import pytest  # noqa: E402

from backend import config  # noqa: E402
from backend.auth import create_session_token  # noqa: E402
from backend.main import app  # noqa: E402


@pytest.fixture
async def async_client():
    """Async HTTP client against the ASGI app."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def session_header():
    """Cookie header carrying a valid session for the demo account."""
    token = create_session_token(config.settings.DEMO_EMAIL)
    return {"cookie": f"{config.settings.SESSION_COOKIE}={token}"}
