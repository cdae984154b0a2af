from pydantic import TypeAdapter

from dispatcher.core.core import ServiceClient
from dispatcher.core.modules.clicker.models import Click, ClickRequest

_clicks = TypeAdapter(list[Click])


class ClickerServiceClient(ServiceClient):
    """Client of the click-tracking service."""

    name = "clicker"

    @property
    def base_url(self) -> str:
        return self.config.clicker_service_url

    async def save_click(self, click: ClickRequest) -> None:
        await self._request("POST", "/clicks", json=click.model_dump())

    async def list_clicks(self, username: str) -> list[Click]:
        """Get all clicks of a user in insertion order."""
        response = await self._request("GET", "/clicks", params={"username": username})
        return self._decode(response, _clicks)
