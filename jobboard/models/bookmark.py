"""Applicant job bookmark model."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.core.storage import Base


def _utc_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class JobBookmark(Base):
    """Association between an applicant and a job they saved."""

    __tablename__ = "applicant_job_bookmarks"
    __table_args__ = (
        UniqueConstraint(
            "applicant_public_id",
            "job_public_id",
            name="uq_applicant_job_bookmark",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    public_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        unique=True,
        default=lambda: str(uuid.uuid4()),
    )
    applicant_public_id: Mapped[str] = mapped_column(
        String(36), nullable=False, index=True
    )
    job_public_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utc_now, nullable=False
    )
