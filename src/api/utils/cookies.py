from datetime import datetime, timezone

from fastapi import Response

from config import ApplicationConfig


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the session token; the cookie lives exactly as long as the token."""
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=token,
        max_age=ApplicationConfig.SESSION_TTL_SECONDS,
        httponly=True,
        secure=ApplicationConfig.ENVIRONMENT != "development",
        samesite="strict",
    )


def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value="",
        expires=datetime(1970, 1, 1, tzinfo=timezone.utc),
        max_age=0,
        httponly=True,
        secure=ApplicationConfig.ENVIRONMENT != "development",
        samesite="strict",
    )
