from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import structlog
from pydantic import BaseModel

from dispatcher.config import Config
from dispatcher.core.core import Core
from dispatcher.core.modules.clicker.models import ClickRequest
from dispatcher.core.modules.registration.models import RegistrationStatus
from dispatcher.core.modules.session.models import AuthToken
from dispatcher.core.modules.user.models import LoginTokens
from dispatcher.core.modules.view.models import LoginView, RegistrationResultView, TableView
from dispatcher.errors import ServiceRejectedError, ServiceUnavailableError

logger = structlog.get_logger(__name__)


class LoginOutcome(BaseModel):
    """Result of a login attempt: tokens to store plus the page to show."""

    tokens: LoginTokens | None = None
    view: TableView | LoginView


class App:
    """Facade for all request flows, sequencing session resolution and downstream calls."""

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._core = Core(config, transport)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def resolve_identity(self, auth_token: AuthToken | None) -> str | None:
        """Resolve the username behind a token, None if there is no valid session."""
        return await self._core.services.session.resolve_identity(auth_token)

    async def get_landing_view(self, auth_token: AuthToken | None) -> TableView | None:
        """Build the landing table for a logged in caller, None means show the login form."""
        username = await self.resolve_identity(auth_token)
        if username is None:
            return None
        return await self._core.services.view.build_view(username)

    async def register(self, login: str) -> RegistrationResultView:
        """Generate a code for the login and create the user record."""
        registration = await self._core.services.registration.register(login)
        if registration.status is not RegistrationStatus.COMPLETED:
            return RegistrationResultView(error=registration.error)
        return RegistrationResultView(login=registration.login, code=registration.code)

    async def login(self, login: str, code: str) -> LoginOutcome:
        """Exchange login and code for tokens and build the first view."""
        try:
            tokens = await self._core.services.user.login(login, code)
        except (ServiceRejectedError, ServiceUnavailableError) as e:
            logger.info("login_failed", login=login, error=str(e))
            return LoginOutcome(view=LoginView(error=str(e)))

        if tokens is None:
            return LoginOutcome(view=await self._core.services.view.build_view(None))

        username = await self.resolve_identity(AuthToken(tokens.access_token))
        view = await self._core.services.view.build_view(username, login=login)
        logger.info("login_succeeded", login=login, identity_resolved=username is not None)
        return LoginOutcome(tokens=tokens, view=view)

    async def save_coordinate(self, auth_token: AuthToken | None, x: str, y: str) -> TableView:
        """Record a click for the caller, if any, and rebuild the table.

        The owner is resolved from the token on this request; a token that
        expired since the page was loaded drops the click.
        """
        username = await self.resolve_identity(auth_token)
        if username is None:
            logger.info("click_dropped_unauthenticated")
        else:
            try:
                await self._core.services.clicker.save_click(ClickRequest(x=x, y=y, username=username))
            except (ServiceRejectedError, ServiceUnavailableError) as e:
                logger.warning("click_not_saved", username=username, error=str(e))
        return await self._core.services.view.build_view(username)
