"""Application services."""

from jobboard.services.applicant_service import ApplicantService
from jobboard.services.auth_service import AuthService
from jobboard.services.bookmark_service import BookmarkLedger
from jobboard.services.job_service import JobCatalog

__all__ = ["ApplicantService", "AuthService", "BookmarkLedger", "JobCatalog"]
