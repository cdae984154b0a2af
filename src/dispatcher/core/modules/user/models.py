from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TokenStatus(StrEnum):
    """Outcome of asking the user service whether a token is valid."""

    VALID = "valid"
    INVALID = "invalid"
    UNAVAILABLE = "unavailable"


class TokenRequest(BaseModel):
    token: str


class UserCode(BaseModel):
    """Registration record: a login paired with its one-time code."""

    login: str = Field(..., description="User login")
    code: str = Field(..., description="Registration code")


class LoginTokens(BaseModel):
    """Access and refresh tokens issued by the user service."""

    access_token: str = Field(..., alias="accessToken")
    refresh_token: str = Field(..., alias="refreshToken")

    model_config = ConfigDict(populate_by_name=True)
