import asyncio

import structlog

from dispatcher.core.core import Service
from dispatcher.core.modules.clicker.models import Click
from dispatcher.core.modules.user.models import UserCode
from dispatcher.core.modules.view.models import TableView
from dispatcher.errors import ServiceRejectedError, ServiceUnavailableError

logger = structlog.get_logger(__name__)


class ViewService(Service):
    """Builds the landing page model from the user and clicker services."""

    async def build_view(self, username: str | None, login: str | None = None) -> TableView:
        """Gather codes (always) and clicks (with identity only) into one view.

        Both fetches run concurrently; a failed fetch leaves its field empty
        instead of failing the view. The displayed login defaults to the
        resolved username.
        """
        if username is None:
            codes = await self._fetch_codes()
            clicks = None
        else:
            codes, clicks = await asyncio.gather(self._fetch_codes(), self._fetch_clicks(username))
        return TableView(login=login or username, codes=codes, clicks=clicks)

    async def _fetch_codes(self) -> list[UserCode] | None:
        try:
            return await self.core.services.user.list_users()
        except (ServiceRejectedError, ServiceUnavailableError) as e:
            logger.warning("view_codes_unavailable", error=str(e))
            return None

    async def _fetch_clicks(self, username: str) -> list[Click] | None:
        try:
            return await self.core.services.clicker.list_clicks(username)
        except (ServiceRejectedError, ServiceUnavailableError) as e:
            logger.warning("view_clicks_unavailable", username=username, error=str(e))
            return None
