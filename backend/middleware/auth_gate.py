"""
Session gate for page routes.

Public paths (and their sub-paths) pass through. Everything else requires a
valid session cookie and otherwise redirects to /login. A signed-in visitor
opening /login is sent home.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from backend import config
from backend.auth import session_email

logger = logging.getLogger(__name__)

PUBLIC_PATHS: tuple[str, ...] = (
    "/",
    "/login",
    "/dashboard",
    "/docs",
    "/about",
    "/demo",
    "/api",
    "/favicon.ico",
    "/logo.png",
    "/robots.txt",
    "/sitemap.xml",
    "/sitemap.txt",
    "/assets",
    "/static",
    "/settings",
    "/.well-known",
)

GATE_HEADER = "x-mh-gate"


def is_public(path: str) -> bool:
    """
    Exact match on any public path, or a sub-path of one.
    "/" is public only as an exact match.
    """
    if path in PUBLIC_PATHS:
        return True
    return any(p != "/" and path.startswith(p + "/") for p in PUBLIC_PATHS)


class AuthGateMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        authed = session_email(request.cookies.get(config.settings.SESSION_COOKIE)) is not None

        if is_public(path):
            if authed and path == "/login":
                return RedirectResponse(url="/")
            return self._pass_through(await call_next(request))

        if not authed:
            logger.info("gate: unauthenticated request to %s", path)
            return RedirectResponse(url="/login")

        return self._pass_through(await call_next(request))

    @staticmethod
    def _pass_through(response: Response) -> Response:
        if not config.settings.IS_PRODUCTION:
            response.headers[GATE_HEADER] = "hit"
        return response
