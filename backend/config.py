"""
MastroHUB configuration — all environment variables in one place.

Read from environment at runtime. Never hardcode secrets.
"""

from __future__ import annotations

import os

_DEV_JWT_SECRET = "dev-only-insecure-secret"


class Settings:
    """Application settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    APP_VERSION: str = os.environ.get("APP_VERSION", "2.0.0")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # Auth
    JWT_SECRET: str = os.environ.get("JWT_SECRET", "")
    JWT_ALGORITHM: str = "HS256"
    SESSION_COOKIE: str = os.environ.get("SESSION_COOKIE", "mhv2_auth")
    SESSION_MAX_AGE_SECONDS: int = int(os.environ.get("SESSION_MAX_AGE_SECONDS", str(60 * 60 * 24)))

    # Demo login (no user store)
    DEMO_EMAIL: str = os.environ.get("DEMO_EMAIL", "demo@mastrohub.local")
    DEMO_PASSWORD: str = os.environ.get("DEMO_PASSWORD", "demo1234")

    # Data grid
    GRID_PAGE_SIZE: int = int(os.environ.get("GRID_PAGE_SIZE", "10"))

    @property
    def IS_PRODUCTION(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def SIGNING_SECRET(self) -> str:
        return self.JWT_SECRET or _DEV_JWT_SECRET


# Singleton instance
settings = Settings()

# Validate required settings (skip in test mode and local development)
_testing = os.environ.get("TESTING", "").lower() == "true"

if not _testing and settings.ENVIRONMENT != "development":
    if not settings.JWT_SECRET:
        raise RuntimeError("JWT_SECRET environment variable is required")
