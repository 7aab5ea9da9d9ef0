"""Database models."""

from jobboard.models.applicant import Applicant, DesiredCity
from jobboard.models.bookmark import JobBookmark
from jobboard.models.job import Company, Employer, Job

__all__ = [
    "Applicant",
    "Company",
    "DesiredCity",
    "Employer",
    "Job",
    "JobBookmark",
]
