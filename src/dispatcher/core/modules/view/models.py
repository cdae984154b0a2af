from pydantic import BaseModel, Field

from dispatcher.core.modules.clicker.models import Click
from dispatcher.core.modules.user.models import UserCode


class TableView(BaseModel):
    """Landing page aggregate.

    A None list means that part could not be fetched; clicks are also None
    when nobody is logged in.
    """

    login: str | None = None
    codes: list[UserCode] | None = None
    clicks: list[Click] | None = None


class LoginView(BaseModel):
    error: str | None = None
    msg: str | None = None


class RegistrationResultView(BaseModel):
    login: str | None = None
    code: str | None = None
    error: str | None = Field(None, description="Why the registration did not complete")
