from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from dispatcher.core.modules.view.models import LoginView
from dispatcher.web.deps import AppDep, AuthTokenDep
from dispatcher.web.rendering import render_page

router = APIRouter(tags=["pages"])


@router.get(
    "/",
    summary="Landing page",
    description="Show the codes and clicks table to a logged in caller, the login form otherwise.",
    operation_id="landing",
    response_class=HTMLResponse,
)
async def landing(app: AppDep, auth_token: AuthTokenDep) -> HTMLResponse:
    view = await app.get_landing_view(auth_token)
    if view is None:
        return render_page("login", LoginView())
    return render_page("table", view)


@router.get("/login", summary="Login form", operation_id="loginForm", response_class=HTMLResponse)
async def login_form() -> HTMLResponse:
    return render_page("login", LoginView())


@router.get("/registration", summary="Registration form", operation_id="registrationForm", response_class=HTMLResponse)
async def registration_form() -> HTMLResponse:
    return render_page("registration")
