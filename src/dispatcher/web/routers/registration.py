from typing import Annotated

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse

from dispatcher.web.deps import AppDep
from dispatcher.web.rendering import render_page

router = APIRouter(tags=["registration"])


@router.post(
    "/generate",
    summary="Register a login",
    description="Generate a one-time code for the login and create the user record.",
    operation_id="generate",
    response_class=HTMLResponse,
)
async def generate(login: Annotated[str, Form()], app: AppDep) -> HTMLResponse:
    view = await app.register(login)
    return render_page("successful", view)
