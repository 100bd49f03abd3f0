"""Authentication routes for the demo session cookie."""

from __future__ import annotations

import logging
from urllib.parse import parse_qs

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from backend.auth import check_credentials, clear_session_cookie, set_session_cookie
from backend.models.auth import AuthError, LoginRequest, LoginResponse, LogoutResponse, SessionUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


async def _read_credentials(request: Request) -> LoginRequest:
    """
    Credentials from a JSON body, a form body, or the query string, in that order
    of preference by content type.

    Raises:
        ValueError: If the body can't be parsed (json.JSONDecodeError, empty body included)
        ValidationError: If the parsed fields have the wrong shape
    """
    content_type = request.headers.get("content-type", "")

    if "application/json" in content_type:
        body = await request.json()
        if not isinstance(body, dict):
            body = {}
        return LoginRequest.model_validate({k: str(v) for k, v in body.items() if v is not None})

    if "application/x-www-form-urlencoded" in content_type:
        params = parse_qs((await request.body()).decode())
        return LoginRequest.model_validate({k: v[0] for k, v in params.items()})

    return LoginRequest.model_validate(dict(request.query_params))


def _method_not_allowed() -> Response:
    return PlainTextResponse(
        "Method Not Allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": "POST"},
    )


@router.post("/login")
async def login(request: Request) -> Response:
    """
    Check the demo credentials and set the HTTP-only session cookie.

    401 for wrong credentials, 400 for a body that can't be read.
    """
    try:
        creds = await _read_credentials(request)
    except (ValueError, ValidationError) as e:
        logger.info("auth: unreadable login body: %s", e)
        return JSONResponse(
            AuthError(error="Bad request").model_dump(),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    if not check_credentials(creds.email, creds.password):
        logger.info("auth: invalid credentials for %r", creds.email)
        return JSONResponse(
            AuthError(error="Invalid credentials").model_dump(),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    response = JSONResponse(LoginResponse(user=SessionUser(email=creds.email)).model_dump())
    set_session_cookie(response, creds.email)
    logger.info("auth: signed in %s", creds.email)
    return response


@router.get("/login")
async def login_get() -> Response:
    return _method_not_allowed()


@router.post("/logout")
async def logout() -> Response:
    """Clear the session cookie."""
    response = JSONResponse(LogoutResponse().model_dump())
    clear_session_cookie(response)
    return response


@router.get("/logout")
async def logout_get() -> Response:
    return _method_not_allowed()
