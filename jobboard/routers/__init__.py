"""API routers."""

from jobboard.routers.account import router as account_router
from jobboard.routers.auth import router as auth_router
from jobboard.routers.bookmarks import router as bookmarks_router
from jobboard.routers.jobs import router as jobs_router

__all__ = ["account_router", "auth_router", "bookmarks_router", "jobs_router"]
