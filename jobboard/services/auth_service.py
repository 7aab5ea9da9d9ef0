"""Applicant sign-up and login."""

import logging
from dataclasses import dataclass

from jobboard.core.exceptions import UnauthorizedError, ValidationError
from jobboard.core.security import TokenIssuer, generate_password, hash_password
from jobboard.models.applicant import Applicant
from jobboard.services.applicant_service import ApplicantService
from jobboard.services.email.base import EmailSender

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    token: str
    registration_step: str


class AuthService:
    """Creates accounts and exchanges credentials for tokens."""

    def __init__(
        self,
        applicants: ApplicantService,
        token_issuer: TokenIssuer,
        email_sender: EmailSender,
    ):
        self.applicants = applicants
        self.token_issuer = token_issuer
        self.email_sender = email_sender

    async def signup(self, first_name: str, last_name: str, email: str) -> Applicant:
        """Create an applicant with a temporary password and e-mail it to them.

        The account is only kept if the welcome message is accepted for
        delivery, otherwise the applicant could never learn their password.
        """
        if not (first_name and last_name and email):
            raise ValidationError()

        password = generate_password()
        password_hash = await hash_password(password)

        async def send_welcome(applicant: Applicant) -> None:
            await self.email_sender.send_welcome_message(applicant, password)

        return await self.applicants.create_applicant(
            first_name,
            last_name,
            email,
            password_hash,
            after_insert=send_welcome,
        )

    async def login(self, email: str, password: str) -> LoginResult:
        """Verify credentials and mint a header-ready token.

        Raises:
            ValidationError: email or password missing
            UnauthorizedError: credentials do not match
        """
        if not email or not password:
            raise ValidationError()

        result = await self.applicants.authenticate_applicant_password(email, password)
        if not result.matched:
            logger.warning("Login failed: credentials did not match")
            raise UnauthorizedError()

        token = self.token_issuer.issue_for_header(result.public_id)
        logger.info(f"Applicant {result.public_id} logged in")
        return LoginResult(token=token, registration_step=result.registration_step)
