from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080
    debug: bool = False
    user_service_url: str  # Base URL of the user/credential service, e.g. http://user-service:8081
    generator_service_url: str  # Base URL of the registration code generator
    clicker_service_url: str  # Base URL of the click-tracking service
    request_timeout: float = 5.0  # Upper bound in seconds for every downstream call
    cookie_secure: bool = False  # Set to True when served over HTTPS

    model_config = {
        "env_file": [".env"],
        "env_prefix": "DISPATCHER_",
        "extra": "ignore",
    }
