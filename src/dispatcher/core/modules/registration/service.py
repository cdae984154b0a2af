import structlog

from dispatcher.core.core import Service
from dispatcher.core.modules.registration.models import Registration, RegistrationStatus
from dispatcher.errors import ServiceRejectedError, ServiceUnavailableError

logger = structlog.get_logger(__name__)


class RegistrationService(Service):
    """Registers a login in two independent steps.

    The code is generated before the user record exists and there is no
    compensating call: when the user service refuses the record, the code
    stays allocated in the generator. That state is reported as ORPHANED.
    """

    async def register(self, login: str) -> Registration:
        try:
            code = await self.core.services.generator.generate(login)
        except (ServiceRejectedError, ServiceUnavailableError) as e:
            logger.warning("registration_code_not_generated", login=login, error=str(e))
            return Registration(login=login, status=RegistrationStatus.FAILED, error=str(e))

        try:
            await self.core.services.user.create_user(login, code)
        except (ServiceRejectedError, ServiceUnavailableError) as e:
            logger.warning("registration_code_orphaned", login=login, error=str(e))
            return Registration(login=login, status=RegistrationStatus.ORPHANED, error=str(e))

        logger.info("registration_completed", login=login)
        return Registration(login=login, status=RegistrationStatus.COMPLETED, code=code)
