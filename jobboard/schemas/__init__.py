"""Pydantic schemas for request/response validation."""

from jobboard.schemas.applicant import (
    ApplicantResponse,
    LoginRequest,
    LoginResponse,
    SignUpRequest,
    UpdateAccountRequest,
    UpdateJobPreferencesRequest,
    UpdatePasswordRequest,
)
from jobboard.schemas.job import BookmarkResponse, JobResponse

__all__ = [
    "ApplicantResponse",
    "BookmarkResponse",
    "JobResponse",
    "LoginRequest",
    "LoginResponse",
    "SignUpRequest",
    "UpdateAccountRequest",
    "UpdateJobPreferencesRequest",
    "UpdatePasswordRequest",
]
