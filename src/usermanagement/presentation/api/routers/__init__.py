"""API routers."""

from usermanagement.presentation.api.routers.events import router as events_router
from usermanagement.presentation.api.routers.health import router as health_router
from usermanagement.presentation.api.routers.users import router as users_router

__all__ = [
    "events_router",
    "health_router",
    "users_router",
]
