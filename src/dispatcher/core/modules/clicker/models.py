from pydantic import BaseModel, ConfigDict, Field


class Click(BaseModel):
    """A recorded click position."""

    x: str = Field(..., description="Horizontal coordinate, as submitted")
    y: str = Field(..., description="Vertical coordinate, as submitted")

    model_config = ConfigDict(coerce_numbers_to_str=True, frozen=True)


class ClickRequest(Click):
    """A click attributed to a user, as sent to the clicker service."""

    username: str
