"""HTML page rendering with Liquid templates."""

from pathlib import Path

import structlog
from fastapi.responses import HTMLResponse
from liquid import Environment, FileSystemLoader
from pydantic import BaseModel

logger = structlog.get_logger(__name__)

TEMPLATES_PATH = Path(__file__).parent / "templates"

_environment = Environment(loader=FileSystemLoader(TEMPLATES_PATH), autoescape=True)


def render_page(page: str, view: BaseModel | None = None, status_code: int = 200) -> HTMLResponse:
    """Render a page template with the fields of a view model as variables.

    Args:
        page: Template name without the .liquid suffix
        view: View model, its JSON dump becomes the template context
        status_code: HTTP status of the response
    """
    template = _environment.get_template(f"{page}.liquid")
    context = view.model_dump(mode="json") if view is not None else {}
    logger.debug("page_rendered", page=page)
    return HTMLResponse(template.render(**context), status_code=status_code)
