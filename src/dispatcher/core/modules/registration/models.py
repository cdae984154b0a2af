from enum import StrEnum

from pydantic import BaseModel


class RegistrationStatus(StrEnum):
    COMPLETED = "completed"
    FAILED = "failed"  # no code was generated
    ORPHANED = "orphaned"  # code generated, user record not created


class Registration(BaseModel):
    """Outcome of the generate-then-create registration sequence."""

    login: str
    status: RegistrationStatus
    code: str | None = None
    error: str | None = None
