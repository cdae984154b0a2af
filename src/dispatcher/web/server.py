from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dispatcher.app import App
from dispatcher.config import Config
from dispatcher.web.error_handlers import general_exception_handler
from dispatcher.web.routers import auth_router, clicks_router, pages_router, registration_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        # Store app instance and config in app state
        app.state.app = app_instance
        app.state.config = config
        async with app_instance.lifespan():
            yield

    app = FastAPI(title="Dispatcher", lifespan=lifespan)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(pages_router)
    app.include_router(auth_router)
    app.include_router(registration_router)
    app.include_router(clicks_router)

    app.add_exception_handler(Exception, general_exception_handler)

    return app
