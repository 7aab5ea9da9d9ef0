"""Bookmark ledger: jobs an applicant has saved."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jobboard.core.exceptions import NotFoundError, ValidationError
from jobboard.core.storage import async_session
from jobboard.models.bookmark import JobBookmark

logger = logging.getLogger(__name__)


class BookmarkLedger:
    """Records and removes applicant-to-job bookmarks.

    At most one bookmark exists per (applicant, job) pair; the table carries
    a unique constraint and ``create`` returns the existing row instead of
    inserting a second one.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] = async_session):
        self._session_factory = session_factory

    @staticmethod
    def _require_ids(applicant_public_id: str, job_public_id: str) -> None:
        if not applicant_public_id or not job_public_id:
            raise ValidationError()

    @staticmethod
    def _pair_query(applicant_public_id: str, job_public_id: str):
        return select(JobBookmark).where(
            JobBookmark.applicant_public_id == applicant_public_id,
            JobBookmark.job_public_id == job_public_id,
        )

    async def create(self, applicant_public_id: str, job_public_id: str) -> JobBookmark:
        """Bookmark a job, returning the existing bookmark if there is one."""
        self._require_ids(applicant_public_id, job_public_id)

        async with self._session_factory() as session:
            existing = await session.scalar(
                self._pair_query(applicant_public_id, job_public_id)
            )
            if existing is not None:
                return existing

            bookmark = JobBookmark(
                applicant_public_id=applicant_public_id,
                job_public_id=job_public_id,
            )
            session.add(bookmark)
            try:
                await session.commit()
            except IntegrityError:
                # Lost a race with a concurrent create for the same pair.
                await session.rollback()
                winner = await session.scalar(
                    self._pair_query(applicant_public_id, job_public_id)
                )
                if winner is None:
                    raise
                return winner

        logger.info(f"Applicant {applicant_public_id} bookmarked job {job_public_id}")
        return bookmark

    async def get(self, applicant_public_id: str, job_public_id: str) -> JobBookmark | None:
        """Return the bookmark for the pair, or None when there is none."""
        self._require_ids(applicant_public_id, job_public_id)

        async with self._session_factory() as session:
            return await session.scalar(
                self._pair_query(applicant_public_id, job_public_id)
            )

    async def delete(self, applicant_public_id: str, job_public_id: str) -> JobBookmark:
        """Remove the bookmark for the pair.

        Raises NotFoundError when the pair was not bookmarked.
        """
        self._require_ids(applicant_public_id, job_public_id)

        async with self._session_factory() as session:
            async with session.begin():
                bookmark = await session.scalar(
                    self._pair_query(applicant_public_id, job_public_id)
                )
                if bookmark is None:
                    raise NotFoundError(
                        "Bookmark", f"{applicant_public_id}/{job_public_id}"
                    )
                await session.execute(
                    delete(JobBookmark).where(JobBookmark.id == bookmark.id)
                )

        logger.info(
            f"Applicant {applicant_public_id} removed bookmark for job {job_public_id}"
        )
        return bookmark


def get_bookmark_ledger() -> BookmarkLedger:
    """FastAPI dependency for the bookmark ledger."""
    return BookmarkLedger()
