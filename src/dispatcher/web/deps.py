from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie

from dispatcher.app import App
from dispatcher.config import Config
from dispatcher.core.modules.session.models import ACCESS_TOKEN_COOKIE, AuthToken

cookie_scheme = APIKeyCookie(name=ACCESS_TOKEN_COOKIE, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_config(request: Request) -> Config:
    return cast(Config, request.app.state.config)


async def get_auth_token(token_cookie: Annotated[str | None, Depends(cookie_scheme)] = None) -> AuthToken | None:
    """Get the raw access token from its cookie. Validation happens in the session service."""
    if not token_cookie:
        return None
    return AuthToken(token_cookie)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
ConfigDep = Annotated[Config, Depends(get_config)]
AuthTokenDep = Annotated[AuthToken | None, Depends(get_auth_token)]
