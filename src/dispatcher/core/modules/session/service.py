import structlog

from dispatcher.core.core import Service
from dispatcher.core.modules.session.models import AuthToken
from dispatcher.core.modules.user.models import TokenStatus
from dispatcher.errors import ServiceRejectedError, ServiceUnavailableError

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Resolves the caller's identity from the access token cookie.

    Validity and identity are delegated to the user service on every call.
    Nothing is cached, so a token revoked upstream stops working on the very
    next request. Every failure resolves to "no session".
    """

    async def resolve_identity(self, auth_token: AuthToken | None) -> str | None:
        """Return the username owning the token, or None."""
        if not auth_token:
            logger.debug("session_absent")
            return None

        user_client = self.core.services.user
        status = await user_client.check_token(auth_token)
        if status is not TokenStatus.VALID:
            logger.debug("session_rejected", token_status=status)
            return None

        try:
            username = await user_client.get_username(auth_token)
        except (ServiceRejectedError, ServiceUnavailableError) as e:
            logger.warning("session_username_unresolved", error=str(e))
            return None

        if not username:
            logger.warning("session_username_empty")
            return None
        return username
