import structlog
from pydantic import TypeAdapter

from dispatcher.core.core import ServiceClient
from dispatcher.core.modules.user.models import LoginTokens, TokenRequest, TokenStatus, UserCode
from dispatcher.errors import ServiceRejectedError, ServiceUnavailableError

logger = structlog.get_logger(__name__)

_user_codes = TypeAdapter(list[UserCode])
_login_tokens = TypeAdapter(LoginTokens)


class UserServiceClient(ServiceClient):
    """Client of the user/credential service."""

    name = "user"

    @property
    def base_url(self) -> str:
        return self.config.user_service_url

    async def check_token(self, token: str) -> TokenStatus:
        """Ask whether a token is valid. Never raises."""
        try:
            response = await self._request("POST", "/validate", json=TokenRequest(token=token).model_dump())
            valid = self._decode(response, TypeAdapter(bool))
        except ServiceRejectedError:
            return TokenStatus.INVALID
        except ServiceUnavailableError:
            return TokenStatus.UNAVAILABLE
        return TokenStatus.VALID if valid else TokenStatus.INVALID

    async def get_username(self, token: str) -> str:
        response = await self._request("POST", "/username", json=TokenRequest(token=token).model_dump())
        return self._decode_text(response)

    async def login(self, login: str, code: str) -> LoginTokens | None:
        """Exchange a login and code for tokens.

        Returns None when the service answers with a status that is neither
        success nor error (1xx, 3xx); callers treat that as a soft fallback.
        """
        response = await self._request("POST", "/login", json=UserCode(login=login, code=code).model_dump())
        if not response.is_success:
            logger.info("login_unexpected_status", status_code=response.status_code)
            return None
        return self._decode(response, _login_tokens)

    async def create_user(self, login: str, code: str) -> None:
        await self._request("POST", "/users", json=UserCode(login=login, code=code).model_dump())

    async def list_users(self) -> list[UserCode]:
        """List every registration record, regardless of who is asking."""
        response = await self._request("GET", "/users")
        return self._decode(response, _user_codes)
