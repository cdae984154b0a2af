from dispatcher.web.routers.auth import router as auth_router
from dispatcher.web.routers.clicks import router as clicks_router
from dispatcher.web.routers.pages import router as pages_router
from dispatcher.web.routers.registration import router as registration_router

__all__ = [
    "auth_router",
    "clicks_router",
    "pages_router",
    "registration_router",
]
