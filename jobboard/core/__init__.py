"""Core application components."""

from jobboard.core.config import settings
from jobboard.core.exceptions import (
    ApplicationError,
    ConflictError,
    DependencyError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from jobboard.core.storage import Base, Storage, async_session

__all__ = [
    "ApplicationError",
    "Base",
    "ConflictError",
    "DependencyError",
    "NotFoundError",
    "Storage",
    "UnauthorizedError",
    "ValidationError",
    "async_session",
    "settings",
]
