"""API routes for the applicant's job bookmarks."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from jobboard.core.exceptions import (
    NotFoundError,
    bad_request_exception,
    not_found_exception,
    server_error_exception,
)
from jobboard.schemas.applicant import MessageResponse
from jobboard.schemas.job import BookmarkRequest, BookmarkResponse
from jobboard.services.bookmark_service import BookmarkLedger, get_bookmark_ledger
from jobboard.services.dependencies import get_current_applicant_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applicant", tags=["bookmarks"])


@router.post("/bookmark/job", response_model=MessageResponse)
async def bookmark_job(
    request: BookmarkRequest,
    public_id: str = Depends(get_current_applicant_id),
    ledger: BookmarkLedger = Depends(get_bookmark_ledger),
):
    """Bookmark a job. Bookmarking twice is a no-op."""
    if not request.job_id:
        raise bad_request_exception()

    try:
        await ledger.create(public_id, request.job_id)
    except SQLAlchemyError as e:
        logger.error(f"Database error bookmarking job {request.job_id}: {e}")
        raise server_error_exception()
    return MessageResponse(message="Bookmarked")


@router.delete("/bookmark/job", response_model=MessageResponse)
async def delete_bookmark(
    request: BookmarkRequest,
    public_id: str = Depends(get_current_applicant_id),
    ledger: BookmarkLedger = Depends(get_bookmark_ledger),
):
    """Remove a bookmark."""
    if not request.job_id:
        raise bad_request_exception()

    try:
        await ledger.delete(public_id, request.job_id)
    except NotFoundError:
        raise not_found_exception("Bookmark not found")
    except SQLAlchemyError as e:
        logger.error(f"Database error deleting bookmark {request.job_id}: {e}")
        raise server_error_exception()
    return MessageResponse(message="Deleted")


@router.post("/get/job/bookmark", response_model=BookmarkResponse | None)
async def get_bookmark(
    request: BookmarkRequest,
    public_id: str = Depends(get_current_applicant_id),
    ledger: BookmarkLedger = Depends(get_bookmark_ledger),
):
    """Get the bookmark for a job, or null when it is not bookmarked."""
    if not request.job_id:
        raise bad_request_exception()

    try:
        bookmark = await ledger.get(public_id, request.job_id)
    except SQLAlchemyError as e:
        logger.error(f"Database error getting bookmark {request.job_id}: {e}")
        raise server_error_exception()

    if bookmark is None:
        return None
    return BookmarkResponse.from_model(bookmark)
