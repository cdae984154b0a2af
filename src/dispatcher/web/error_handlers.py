import structlog
from fastapi import Request
from fastapi.responses import Response

from dispatcher.web.rendering import render_page

logger = structlog.get_logger(__name__)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return render_page("error", status_code=500)
