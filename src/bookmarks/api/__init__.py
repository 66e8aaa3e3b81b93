"""API route aggregation.

All routers registered here get mounted in main.py. Health and auth
are open; users and bookmarks resolve the caller through the
get_current_user dependency in each handler, which also hands the
identity to the service.
"""

from fastapi import APIRouter

from bookmarks.api.auth import router as auth_router
from bookmarks.api.bookmarks import router as bookmarks_router
from bookmarks.api.health import router as health_router
from bookmarks.api.users import router as users_router

api_router = APIRouter()

# Open routes
api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])

# Protected routes: handlers depend on get_current_user
api_router.include_router(users_router, tags=["users"])
api_router.include_router(bookmarks_router, tags=["bookmarks"])
