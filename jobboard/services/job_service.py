"""Read-only access to the job catalog."""

import logging
from datetime import UTC, datetime, timedelta

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import joinedload

from jobboard.core.exceptions import NotFoundError, ValidationError
from jobboard.core.storage import async_session
from jobboard.models.bookmark import JobBookmark
from jobboard.models.job import Company, Employer, Job

logger = logging.getLogger(__name__)

VISIBILITY_WINDOW = timedelta(days=30)


def _now() -> datetime:
    """Get current time as UTC naive datetime to compare with DB values."""
    return datetime.now(UTC).replace(tzinfo=None)


class JobCatalog:
    """Queries jobs joined with their employer's company."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] = async_session):
        self._session_factory = session_factory

    @staticmethod
    def _base_query() -> Select:
        return (
            select(Job)
            .join(Employer, Job.employer_id == Employer.id)
            .join(Company, Employer.company_id == Company.id)
            .options(joinedload(Job.employer).joinedload(Employer.company))
        )

    @classmethod
    def _visible_query(cls, now: datetime | None = None) -> Select:
        current = now or _now()
        return cls._base_query().where(
            Job.visible_date <= current,
            Job.visible_date >= current - VISIBILITY_WINDOW,
        )

    async def _all(self, query: Select) -> list[Job]:
        async with self._session_factory() as session:
            result = await session.scalars(query)
            return list(result.unique().all())

    async def get_jobs(self, now: datetime | None = None) -> list[Job]:
        """Jobs whose 30-day visibility window contains ``now``."""
        return await self._all(self._visible_query(now).order_by(Job.visible_date.desc()))

    async def get_job(self, public_id: str) -> Job:
        if not public_id:
            raise ValidationError()

        async with self._session_factory() as session:
            job = await session.scalar(
                self._base_query().where(Job.public_id == public_id)
            )
        if job is None:
            raise NotFoundError("Job", public_id)
        return job

    async def get_jobs_by_zipcodes(
        self, zipcodes: list[str], now: datetime | None = None
    ) -> list[Job]:
        """Visible jobs at companies located in any of the given zip codes."""
        if not zipcodes:
            return []
        return await self._all(
            self._visible_query(now)
            .where(Company.zipcode.in_(zipcodes))
            .order_by(Job.visible_date.desc())
        )

    async def get_bookmarked_jobs(self, applicant_public_id: str) -> list[Job]:
        if not applicant_public_id:
            raise ValidationError()
        return await self._all(
            self._base_query()
            .join(JobBookmark, JobBookmark.job_public_id == Job.public_id)
            .where(JobBookmark.applicant_public_id == applicant_public_id)
            .order_by(JobBookmark.created_at, JobBookmark.id)
        )


def get_job_catalog() -> JobCatalog:
    """FastAPI dependency for the job catalog."""
    return JobCatalog()
