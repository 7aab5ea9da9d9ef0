"""Applicant credential store and account management."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jobboard.core.exceptions import ConflictError, NotFoundError, ValidationError
from jobboard.core.security import hash_password, verify_password
from jobboard.core.storage import async_session
from jobboard.models.applicant import Applicant, DesiredCity
from jobboard.schemas.applicant import DesiredCityRequest, UpdateAccountRequest
from jobboard.services import registration
from jobboard.services.registration import RegistrationEvent

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "address",
    "city",
    "state",
    "zipcode",
)


@dataclass
class AuthenticationResult:
    """Outcome of a password check. A mismatch is not an error."""

    matched: bool
    registration_step: str = ""
    public_id: str = ""


class ApplicantService:
    """Reads and writes applicant rows.

    Every mutation locks the applicant row, performs its write and runs the
    registration state machine inside one transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] = async_session):
        self._session_factory = session_factory

    async def create_applicant(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
        after_insert: Callable[[Applicant], Awaitable[Any]] | None = None,
    ) -> Applicant:
        """Create an applicant at the first registration step.

        ``after_insert`` runs once the row is flushed but before commit; if it
        raises, the insert is rolled back.
        """
        if not (first_name and last_name and email and password_hash):
            raise ValidationError("First name, last name, email and password are required")

        async with self._session_factory() as session:
            applicant = Applicant(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=password_hash,
                registration_step=registration.INITIAL_STEP.value,
            )
            session.add(applicant)
            try:
                await session.flush()
            except IntegrityError as e:
                await session.rollback()
                logger.warning("Sign-up rejected: email already registered")
                raise ConflictError("Applicant", "email") from e

            if after_insert is not None:
                try:
                    await after_insert(applicant)
                except Exception:
                    await session.rollback()
                    logger.error(
                        f"Rolled back applicant {applicant.public_id} after post-insert failure"
                    )
                    raise

            await session.commit()
            logger.info(f"Created applicant {applicant.public_id}")
            return applicant

    async def get_applicant(self, public_id: str) -> Applicant:
        """Get an applicant by public id."""
        if not public_id:
            raise ValidationError()

        async with self._session_factory() as session:
            applicant = await session.scalar(
                select(Applicant).where(Applicant.public_id == public_id)
            )
        if applicant is None:
            raise NotFoundError("Applicant", public_id)
        return applicant

    async def authenticate_applicant_password(
        self, email: str, password: str
    ) -> AuthenticationResult:
        """Check an email/password pair against the stored hash."""
        if not email or not password:
            return AuthenticationResult(matched=False)

        async with self._session_factory() as session:
            row = (
                await session.execute(
                    select(
                        Applicant.password_hash,
                        Applicant.registration_step,
                        Applicant.public_id,
                    ).where(Applicant.email == email)
                )
            ).first()

        if row is None:
            return AuthenticationResult(matched=False)

        password_hash, registration_step, public_id = row
        if not await verify_password(password_hash, password):
            return AuthenticationResult(matched=False)

        return AuthenticationResult(
            matched=True,
            registration_step=registration_step or "",
            public_id=public_id,
        )

    async def update_applicant_password(
        self, public_id: str, current_password: str, new_password: str
    ) -> bool:
        """Replace the password when the current one matches.

        Returns False, leaving the row untouched, when the applicant does not
        exist or the current password is wrong.
        """
        if not (public_id and current_password and new_password):
            return False

        async with self._session_factory() as session:
            async with session.begin():
                applicant = await self._lock_applicant(session, public_id)
                if applicant is None:
                    return False

                if not await verify_password(applicant.password_hash, current_password):
                    logger.warning(
                        f"Password update rejected for applicant {public_id}: "
                        "current password mismatch"
                    )
                    return False

                applicant.password_hash = await hash_password(new_password)
                registration.advance(applicant, RegistrationEvent.PASSWORD_UPDATED)

        logger.info(f"Password updated for applicant {public_id}")
        return True

    async def update_applicant_account(
        self,
        public_id: str,
        update: UpdateAccountRequest,
        latitude: float = 0.0,
        longitude: float = 0.0,
    ) -> Applicant:
        """Apply a sparse profile patch and return the stored record."""
        if not public_id:
            raise ValidationError()

        async with self._session_factory() as session:
            try:
                async with session.begin():
                    applicant = await self._lock_applicant(session, public_id)
                    if applicant is None:
                        raise NotFoundError("Applicant", public_id)

                    for field in PROFILE_FIELDS:
                        value = getattr(update, field)
                        if value and value.strip():
                            setattr(applicant, field, value.strip())

                    if latitude:
                        applicant.latitude = latitude
                    if longitude:
                        applicant.longitude = longitude

                    registration.advance(applicant, RegistrationEvent.ACCOUNT_UPDATED)
            except IntegrityError as e:
                logger.warning(
                    f"Account update rejected for applicant {public_id}: email in use"
                )
                raise ConflictError("Applicant", "email") from e

        return await self.get_applicant(public_id)

    async def update_applicant_job_preferences(
        self, public_id: str, desired_cities: list[DesiredCityRequest]
    ) -> None:
        """Store the applicant's desired cities."""
        if not public_id:
            raise ValidationError()

        async with self._session_factory() as session:
            async with session.begin():
                applicant = await self._lock_applicant(session, public_id)
                if applicant is None:
                    raise NotFoundError("Applicant", public_id)

                for city in desired_cities:
                    session.add(DesiredCity(applicant_id=applicant.id, **city.model_dump()))

                registration.advance(applicant, RegistrationEvent.PREFERENCES_UPDATED)

        logger.info(
            f"Stored {len(desired_cities)} desired cities for applicant {public_id}"
        )

    @staticmethod
    async def _lock_applicant(session: AsyncSession, public_id: str) -> Applicant | None:
        return await session.scalar(
            select(Applicant).where(Applicant.public_id == public_id).with_for_update()
        )


def get_applicant_service() -> ApplicantService:
    """FastAPI dependency for the applicant service."""
    return ApplicantService()
