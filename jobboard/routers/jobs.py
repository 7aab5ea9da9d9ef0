"""API routes for browsing and searching jobs."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from jobboard.core.exceptions import (
    DependencyError,
    NotFoundError,
    ValidationError,
    bad_request_exception,
    not_found_exception,
    server_error_exception,
)
from jobboard.schemas.job import JobLookupRequest, JobResponse, JobsByRadiusRequest
from jobboard.services.dependencies import get_current_applicant_id, get_geocoder
from jobboard.services.geocoding import Geocoder
from jobboard.services.job_service import JobCatalog, get_job_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applicant", tags=["jobs"])


@router.get(
    "/get/jobs",
    response_model=list[JobResponse],
    dependencies=[Depends(get_current_applicant_id)],
)
async def get_jobs(
    catalog: JobCatalog = Depends(get_job_catalog),
):
    """List currently visible jobs."""
    try:
        jobs = await catalog.get_jobs()
    except SQLAlchemyError as e:
        logger.error(f"Database error listing jobs: {e}")
        raise server_error_exception()
    return [JobResponse.from_model(job) for job in jobs]


@router.post(
    "/get/job",
    response_model=JobResponse,
    dependencies=[Depends(get_current_applicant_id)],
)
async def get_job(
    request: JobLookupRequest,
    catalog: JobCatalog = Depends(get_job_catalog),
):
    """Get a single job by public id."""
    if not request.public_id:
        raise bad_request_exception()

    try:
        job = await catalog.get_job(request.public_id)
    except NotFoundError:
        raise not_found_exception("Job not found")
    except SQLAlchemyError as e:
        logger.error(f"Database error getting job {request.public_id}: {e}")
        raise server_error_exception()
    return JobResponse.from_model(job)


@router.post(
    "/get/jobs/radius",
    response_model=list[JobResponse],
    dependencies=[Depends(get_current_applicant_id)],
)
async def get_jobs_by_radius(
    request: JobsByRadiusRequest,
    catalog: JobCatalog = Depends(get_job_catalog),
    geocoder: Geocoder = Depends(get_geocoder),
):
    """List visible jobs at companies within a radius of a zip code."""
    if not request.zipcode or request.radius <= 0:
        raise bad_request_exception()

    try:
        nearby = await geocoder.get_zip_codes_in_radius(request.zipcode, request.radius)
        zipcodes = list(dict.fromkeys([request.zipcode, *(z.zip_code for z in nearby)]))
        jobs = await catalog.get_jobs_by_zipcodes(zipcodes)
    except ValidationError as e:
        raise bad_request_exception(e.message)
    except DependencyError as e:
        logger.error(f"Radius lookup failed for {request.zipcode}: {e}")
        raise server_error_exception()
    except SQLAlchemyError as e:
        logger.error(f"Database error searching jobs by radius: {e}")
        raise server_error_exception()
    return [JobResponse.from_model(job) for job in jobs]


@router.get("/get/jobs/bookmarked", response_model=list[JobResponse])
async def get_bookmarked_jobs(
    public_id: str = Depends(get_current_applicant_id),
    catalog: JobCatalog = Depends(get_job_catalog),
):
    """List the jobs the applicant has bookmarked."""
    try:
        jobs = await catalog.get_bookmarked_jobs(public_id)
    except SQLAlchemyError as e:
        logger.error(f"Database error listing bookmarked jobs for {public_id}: {e}")
        raise server_error_exception()
    return [JobResponse.from_model(job) for job in jobs]
