"""
Session authentication for MastroHUB.

Demo credential check, JWT issuance for the session cookie, and cookie
verification used by the path gate.
"""

from __future__ import annotations

import hmac
import logging
from datetime import UTC, datetime, timedelta

import jwt
from fastapi import HTTPException, Request, Response, status

from backend import config

logger = logging.getLogger(__name__)


def check_credentials(email: str, password: str) -> bool:
    """Compare against the configured demo account in constant time."""
    email_ok = hmac.compare_digest(email.encode(), config.settings.DEMO_EMAIL.encode())
    password_ok = hmac.compare_digest(password.encode(), config.settings.DEMO_PASSWORD.encode())
    return email_ok and password_ok


def create_session_token(email: str) -> str:
    """
    Create a JWT for a browser session.

    Args:
        email: Account email to encode in the token

    Returns:
        Signed JWT string
    """
    now = datetime.now(UTC)
    payload = {
        "sub": email,
        "exp": now + timedelta(seconds=config.settings.SESSION_MAX_AGE_SECONDS),
        "iat": now,
    }
    return jwt.encode(payload, config.settings.SIGNING_SECRET, algorithm=config.settings.JWT_ALGORITHM)


def decode_session_token(token: str) -> dict:
    """
    Decode and verify a session JWT.

    Raises:
        HTTPException: If token is invalid or expired
    """
    try:
        return jwt.decode(token, config.settings.SIGNING_SECRET, algorithms=[config.settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired. Please sign in again.",
        ) from e
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session token. Please sign in again.",
        ) from e


def session_email(token: str | None) -> str | None:
    """Email carried by a valid session cookie, None otherwise."""
    if not token:
        return None
    try:
        payload = decode_session_token(token)
    except HTTPException:
        logger.info("auth: rejected session cookie")
        return None
    return payload.get("sub")


def require_session(request: Request) -> str:
    """
    FastAPI dependency for API routes that need a signed-in account.

    Raises:
        HTTPException: 401 when there is no valid session cookie
    """
    token = request.cookies.get(config.settings.SESSION_COOKIE)
    email = decode_session_token(token).get("sub") if token else None
    if not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in.",
        )
    return email


def set_session_cookie(response: Response, email: str) -> None:
    response.set_cookie(
        key=config.settings.SESSION_COOKIE,
        value=create_session_token(email),
        httponly=True,
        secure=config.settings.IS_PRODUCTION,
        samesite="lax",
        path="/",
        max_age=config.settings.SESSION_MAX_AGE_SECONDS,
    )


def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        key=config.settings.SESSION_COOKIE,
        value="",
        path="/",
        max_age=0,
    )
