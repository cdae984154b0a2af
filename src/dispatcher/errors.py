from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class ServiceRejectedError(UserError):
    """Raised when a downstream service answers with a non-2xx status.

    The message is extracted from the downstream response so it can be shown
    next to the form that triggered the call (duplicate login, wrong code).
    """

    def __init__(self, service: str, status_code: int, message: str) -> None:
        self.service = service
        self.status_code = status_code
        super().__init__(f"[{status_code}] {service} service: {message}")


class ServiceUnavailableError(Exception):
    """Raised when a downstream service cannot be reached or answers garbage."""

    def __init__(self, service: str, reason: str = "") -> None:
        self.service = service
        self.reason = reason
        super().__init__(f"{service} service is unavailable")
