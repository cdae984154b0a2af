from typing import Annotated

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse

from dispatcher.core.modules.view.models import LoginView, TableView
from dispatcher.web.cookies import clear_token_cookies, set_token_cookies
from dispatcher.web.deps import AppDep, ConfigDep
from dispatcher.web.rendering import render_page

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    summary="Log in",
    description="Exchange a login and its registration code for session cookies.",
    operation_id="login",
    response_class=HTMLResponse,
)
async def login(
    login: Annotated[str, Form()],
    code: Annotated[str, Form()],
    app: AppDep,
    config: ConfigDep,
) -> HTMLResponse:
    outcome = await app.login(login, code)

    if isinstance(outcome.view, TableView):
        response = render_page("table", outcome.view)
    else:
        response = render_page("login", outcome.view)

    if outcome.tokens is not None:
        set_token_cookies(response, outcome.tokens, secure=config.cookie_secure)
    return response


@router.get("/logout", summary="Log out", operation_id="logout", response_class=HTMLResponse)
async def logout(config: ConfigDep) -> HTMLResponse:
    response = render_page("login", LoginView(msg="Successful logout"))
    clear_token_cookies(response, secure=config.cookie_secure)
    return response
