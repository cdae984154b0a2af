from __future__ import annotations

import importlib
from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, TypeVar, cast

import httpx
import structlog
from pydantic import TypeAdapter

from dispatcher.config import Config
from dispatcher.errors import ServiceRejectedError, ServiceUnavailableError

if TYPE_CHECKING:
    from dispatcher.core.modules.clicker.client import ClickerServiceClient
    from dispatcher.core.modules.generator.client import GeneratorServiceClient
    from dispatcher.core.modules.registration.service import RegistrationService
    from dispatcher.core.modules.session.service import SessionService
    from dispatcher.core.modules.user.client import UserServiceClient
    from dispatcher.core.modules.view.service import ViewService

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class Service:
    """Base class for services wired into the core container."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class ServiceClient(Service, ABC):
    """Base class for HTTP clients of downstream services.

    Owns the connection pool to one downstream service and translates every
    transport or protocol failure into ServiceUnavailableError, and every
    4xx/5xx answer into ServiceRejectedError carrying the downstream message.
    """

    name = "downstream"

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Root URL every request path is joined to."""

    async def on_start(self) -> None:
        """Open the connection pool."""
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.config.request_timeout,
            transport=self.core.transport,
        )
        logger.debug("service_client_started", service=self.name, base_url=self.base_url)

    async def on_stop(self) -> None:
        """Close the connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError(f"{self.name} client is not started")
        return self._client

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request, raising domain errors instead of httpx ones."""
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("downstream_unavailable", service=self.name, method=method, path=path, error=str(e))
            raise ServiceUnavailableError(self.name, str(e)) from e

        if response.is_error:
            message = extract_error_message(response)
            logger.info(
                "downstream_rejected", service=self.name, method=method, path=path, status_code=response.status_code
            )
            raise ServiceRejectedError(self.name, response.status_code, message)
        return response

    def _decode(self, response: httpx.Response, adapter: TypeAdapter[T]) -> T:
        """Decode a JSON body into the expected type."""
        try:
            return adapter.validate_python(response.json())
        except ValueError as e:
            logger.warning("downstream_bad_payload", service=self.name, path=response.request.url.path, error=str(e))
            raise ServiceUnavailableError(self.name, "unexpected response body") from e

    def _decode_text(self, response: httpx.Response) -> str:
        """Decode a body that is either a JSON string or plain text."""
        if "json" in response.headers.get("content-type", ""):
            return self._decode(response, TypeAdapter(str))
        return response.text.strip()


def extract_error_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    elif isinstance(body, str) and body:
        return body

    text = response.text.strip()
    if text and body is None:
        return text
    return f"{response.status_code} {response.reason_phrase}".strip()


class Services:
    """Service registry that automatically discovers and initializes services."""

    user: UserServiceClient
    generator: GeneratorServiceClient
    clicker: ClickerServiceClient
    session: SessionService
    view: ViewService
    registration: RegistrationService

    def __init__(self, config: Config) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []

        # Service configuration: (attribute_name, module_path, class_name)
        # Downstream clients first, they must be started before anything calls them
        service_configs = [
            ("user", "dispatcher.core.modules.user.client", "UserServiceClient"),
            ("generator", "dispatcher.core.modules.generator.client", "GeneratorServiceClient"),
            ("clicker", "dispatcher.core.modules.clicker.client", "ClickerServiceClient"),
            ("session", "dispatcher.core.modules.session.service", "SessionService"),
            ("view", "dispatcher.core.modules.view.service", "ViewService"),
            ("registration", "dispatcher.core.modules.registration.service", "RegistrationService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(config)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in reversed(self._services):
            await service.on_stop()


class Core:
    """Container providing config, the outbound transport, and all service instances."""

    config: Config
    transport: httpx.AsyncBaseTransport | None
    services: Services

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize core with config and auto-register services.

        A custom transport replaces the network for every downstream client.
        """
        self.config = config
        self.transport = transport
        self.services = Services(config)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        await self.services.stop_all()
