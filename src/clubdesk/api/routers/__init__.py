"""API routers package."""

from clubdesk.api.routers.dashboard import router as dashboard_router
from clubdesk.api.routers.events import router as events_router
from clubdesk.api.routers.posts import router as posts_router
from clubdesk.api.routers.uploads import router as uploads_router

__all__ = [
    "dashboard_router",
    "events_router",
    "posts_router",
    "uploads_router",
]
