"""
MastroHUB FastAPI application.

Entry point for the API server.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI

from backend import config
from backend.middleware.auth_gate import AuthGateMiddleware
from backend.routes import auth_routes
from backend.routes import dashboard as dashboard_routes
from backend.routes import posts as posts_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    logging.basicConfig(
        level=config.settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("MastroHUB %s starting (%s)", config.settings.APP_VERSION, config.settings.ENVIRONMENT)
    yield
    logger.info("MastroHUB stopped")


app = FastAPI(
    title="MastroHUB",
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(AuthGateMiddleware)

# Register routes
app.include_router(auth_routes.router)
app.include_router(posts_routes.router)
app.include_router(dashboard_routes.router)


@app.get("/api/health")
async def health():
    """Health check endpoint for uptime monitoring."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "version": config.settings.APP_VERSION,
    }
