"""Access and refresh token cookies. Both are always written together."""

from fastapi import Response

from dispatcher.core.modules.session.models import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE, TOKEN_COOKIE_MAX_AGE
from dispatcher.core.modules.user.models import LoginTokens


def _set_token_cookie(response: Response, key: str, value: str, max_age: int, secure: bool) -> None:
    response.set_cookie(
        key=key,
        value=value,
        max_age=max_age,
        path="/",
        httponly=True,
        samesite="lax",
        secure=secure,
    )


def set_token_cookies(response: Response, tokens: LoginTokens, secure: bool = False) -> None:
    _set_token_cookie(response, ACCESS_TOKEN_COOKIE, tokens.access_token, TOKEN_COOKIE_MAX_AGE, secure)
    _set_token_cookie(response, REFRESH_TOKEN_COOKIE, tokens.refresh_token, TOKEN_COOKIE_MAX_AGE, secure)


def clear_token_cookies(response: Response, secure: bool = False) -> None:
    _set_token_cookie(response, ACCESS_TOKEN_COOKIE, "", 0, secure)
    _set_token_cookie(response, REFRESH_TOKEN_COOKIE, "", 0, secure)
