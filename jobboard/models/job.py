"""Job catalog models.

These tables are owned by the employer side of the product; this service
only reads them.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobboard.core.storage import Base


def _utc_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def _new_public_id() -> str:
    return str(uuid.uuid4())


class Company(Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    public_id: Mapped[str] = mapped_column(
        String(36), nullable=False, unique=True, default=_new_public_id
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    logo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    location: Mapped[str | None] = mapped_column(String(500), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True, index=True)


class Employer(Base):
    __tablename__ = "employers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    public_id: Mapped[str] = mapped_column(
        String(36), nullable=False, unique=True, default=_new_public_id
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    company_id: Mapped[int] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )

    company: Mapped[Company] = relationship()


class Job(Base):
    """A job listing posted by an employer."""

    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    public_id: Mapped[str] = mapped_column(
        String(36), nullable=False, unique=True, index=True, default=_new_public_id
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    job_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    visible_date: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True, index=True
    )
    remote: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    min_salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    max_salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pay_period: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_customized: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    employer_id: Mapped[int] = mapped_column(
        ForeignKey("employers.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utc_now, onupdate=_utc_now, nullable=False
    )

    employer: Mapped[Employer] = relationship()
