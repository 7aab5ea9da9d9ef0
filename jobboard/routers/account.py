"""API routes for the authenticated applicant's account."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from jobboard.core.exceptions import (
    MISSING_REQUIRED_VALUE,
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    bad_request_exception,
    conflict_exception,
    not_found_exception,
    server_error_exception,
)
from jobboard.schemas.applicant import (
    ApplicantResponse,
    AutocompleteRequest,
    MessageResponse,
    UpdateAccountRequest,
    UpdateJobPreferencesRequest,
    UpdatePasswordRequest,
)
from jobboard.services.applicant_service import ApplicantService, get_applicant_service
from jobboard.services.dependencies import get_current_applicant_id, get_geocoder
from jobboard.services.geocoding import Geocoder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applicant", tags=["account"])

SUCCESS = "Success"


@router.post("/update-password", response_model=MessageResponse)
async def update_password(
    request: UpdatePasswordRequest,
    public_id: str = Depends(get_current_applicant_id),
    applicants: ApplicantService = Depends(get_applicant_service),
):
    """Change the password; requires the current one."""
    if not request.password or not request.new_password:
        raise bad_request_exception()

    try:
        updated = await applicants.update_applicant_password(
            public_id, request.password, request.new_password
        )
    except ValidationError as e:
        raise bad_request_exception(e.message)
    except SQLAlchemyError as e:
        logger.error(f"Database error updating password for {public_id}: {e}")
        raise server_error_exception()

    if not updated:
        raise bad_request_exception()
    return MessageResponse(message=SUCCESS)


@router.post("/update-account", response_model=ApplicantResponse)
async def update_account(
    request: UpdateAccountRequest,
    public_id: str = Depends(get_current_applicant_id),
    applicants: ApplicantService = Depends(get_applicant_service),
    geocoder: Geocoder = Depends(get_geocoder),
):
    """Patch profile fields. A zip code is resolved to coordinates first."""
    latitude = longitude = 0.0
    zipcode = request.zipcode.strip()
    try:
        if zipcode:
            zip_code = await geocoder.get_zip_code(zipcode)
            latitude, longitude = zip_code.latitude, zip_code.longitude

        applicant = await applicants.update_applicant_account(
            public_id, request, latitude=latitude, longitude=longitude
        )
    except ValidationError as e:
        raise bad_request_exception(e.message)
    except NotFoundError:
        raise not_found_exception("Applicant not found")
    except ConflictError:
        raise conflict_exception("An account with this email already exists")
    except DependencyError as e:
        logger.error(f"Zip code lookup failed for {public_id}: {e}")
        raise server_error_exception()
    except SQLAlchemyError as e:
        logger.error(f"Database error updating account for {public_id}: {e}")
        raise server_error_exception()

    return ApplicantResponse.from_model(applicant)


@router.post("/update-job-preferences", response_model=MessageResponse)
async def update_job_preferences(
    request: UpdateJobPreferencesRequest,
    public_id: str = Depends(get_current_applicant_id),
    applicants: ApplicantService = Depends(get_applicant_service),
):
    """Store the applicant's desired cities."""
    try:
        await applicants.update_applicant_job_preferences(
            public_id, request.desired_cities
        )
    except NotFoundError:
        raise not_found_exception("Applicant not found")
    except SQLAlchemyError as e:
        logger.error(f"Database error updating job preferences for {public_id}: {e}")
        raise server_error_exception()

    return MessageResponse(message=SUCCESS)


@router.get("/get", response_model=ApplicantResponse)
async def get_applicant(
    public_id: str = Depends(get_current_applicant_id),
    applicants: ApplicantService = Depends(get_applicant_service),
):
    """Get the authenticated applicant."""
    try:
        applicant = await applicants.get_applicant(public_id)
    except NotFoundError:
        raise not_found_exception("Applicant not found")
    except SQLAlchemyError as e:
        logger.error(f"Database error getting applicant {public_id}: {e}")
        raise server_error_exception()

    return ApplicantResponse.from_model(applicant)


@router.post(
    "/get/location/autocomplete",
    dependencies=[Depends(get_current_applicant_id)],
)
async def autocomplete_location(
    request: AutocompleteRequest,
    geocoder: Geocoder = Depends(get_geocoder),
):
    """Suggest locations for partially typed text."""
    if not request.chars:
        raise bad_request_exception(MISSING_REQUIRED_VALUE)

    try:
        return await geocoder.autocomplete(request.chars)
    except DependencyError as e:
        logger.error(f"Location autocomplete failed: {e}")
        raise server_error_exception()
