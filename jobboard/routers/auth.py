"""Authentication router for applicant sign-up and login."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from jobboard.core.exceptions import (
    MISSING_REQUIRED_VALUE,
    ConflictError,
    DependencyError,
    UnauthorizedError,
    ValidationError,
    bad_request_exception,
    conflict_exception,
    server_error_exception,
    unauthorized_exception,
)
from jobboard.schemas.applicant import LoginRequest, LoginResponse, SignUpRequest
from jobboard.services.auth_service import AuthService
from jobboard.services.dependencies import get_auth_service, require_api_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applicant", tags=["auth"])


@router.post("/signup", dependencies=[Depends(require_api_key)])
async def signup(
    request: SignUpRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """Create an applicant and e-mail them a temporary password."""
    if not (request.first_name and request.last_name and request.email):
        raise bad_request_exception(MISSING_REQUIRED_VALUE)

    try:
        await auth.signup(request.first_name, request.last_name, request.email)
    except ValidationError as e:
        raise bad_request_exception(e.message)
    except ConflictError:
        raise conflict_exception("An account with this email already exists")
    except DependencyError as e:
        logger.error(f"Sign-up failed, welcome message not delivered: {e}")
        raise server_error_exception()
    except SQLAlchemyError as e:
        logger.error(f"Database error during sign-up: {e}")
        raise server_error_exception()

    return ""


@router.post(
    "/login",
    response_model=LoginResponse,
    dependencies=[Depends(require_api_key)],
)
async def login(
    request: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """Exchange email and password for a bearer token."""
    if not request.email or not request.password:
        raise bad_request_exception("Bad Request")

    try:
        result = await auth.login(request.email, request.password)
    except ValidationError:
        raise bad_request_exception("Bad Request")
    except UnauthorizedError:
        raise unauthorized_exception("Login failed")
    except SQLAlchemyError as e:
        logger.error(f"Database error during login: {e}")
        raise server_error_exception("Internal Server Error")

    return LoginResponse(token=result.token, registration_step=result.registration_step)
