"""Custom exceptions for the application."""

from fastapi import HTTPException, status

FRIENDLY_ERROR = "Something went wrong. Please try again later."
MISSING_REQUIRED_VALUE = "Missing required value"


class ApplicationError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when input is missing or malformed."""

    def __init__(self, message: str = MISSING_REQUIRED_VALUE):
        super().__init__(message)


class ConflictError(ApplicationError):
    """Raised when a write collides with a unique field."""

    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(f"{entity} with this {field} already exists")


class NotFoundError(ApplicationError):
    """Raised when the requested entity does not exist."""

    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier} not found")


class UnauthorizedError(ApplicationError):
    """Raised when credentials do not match."""

    def __init__(self, detail: str = "Login failed"):
        self.detail = detail
        super().__init__(detail)


class DependencyError(ApplicationError):
    """Raised when an external collaborator or the store fails."""

    def __init__(self, service: str, detail: str, status_code: int | None = None):
        self.service = service
        self.detail = detail
        self.status_code = status_code
        if status_code is None:
            super().__init__(f"{service} error: {detail}")
        else:
            super().__init__(f"{service} error ({status_code}): {detail}")


def bad_request_exception(detail: str = FRIENDLY_ERROR) -> HTTPException:
    """Return a 400 Bad Request exception."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )


def unauthorized_exception(detail: str = "Login failed") -> HTTPException:
    """Return a 401 Unauthorized exception."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def not_found_exception(detail: str = "Resource not found") -> HTTPException:
    """Return a 404 Not Found exception."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def conflict_exception(detail: str = "Resource already exists") -> HTTPException:
    """Return a 409 Conflict exception."""
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=detail,
    )


def server_error_exception(detail: str = FRIENDLY_ERROR) -> HTTPException:
    """Return a 500 Internal Server Error exception."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )
