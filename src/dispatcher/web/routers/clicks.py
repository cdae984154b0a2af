from typing import Annotated

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse

from dispatcher.web.deps import AppDep, AuthTokenDep
from dispatcher.web.rendering import render_page

router = APIRouter(tags=["clicks"])


@router.post(
    "/saveCoordinate",
    summary="Record a click",
    description="Save the clicked position for the logged in caller and show the refreshed table.",
    operation_id="saveCoordinate",
    response_class=HTMLResponse,
)
async def save_coordinate(
    x: Annotated[str, Form()],
    y: Annotated[str, Form()],
    app: AppDep,
    auth_token: AuthTokenDep,
) -> HTMLResponse:
    view = await app.save_coordinate(auth_token, x, y)
    return render_page("table", view)
