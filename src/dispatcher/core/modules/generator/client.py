from pydantic import BaseModel

from dispatcher.core.core import ServiceClient


class GenerateRequest(BaseModel):
    login: str


class GeneratorServiceClient(ServiceClient):
    """Client of the one-time registration code generator."""

    name = "generator"

    @property
    def base_url(self) -> str:
        return self.config.generator_service_url

    async def generate(self, login: str) -> str:
        response = await self._request("POST", "/generate", json=GenerateRequest(login=login).model_dump())
        return self._decode_text(response)
