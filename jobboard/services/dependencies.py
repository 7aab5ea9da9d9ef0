"""FastAPI dependencies for services and collaborators.

Tests replace any of these through ``app.dependency_overrides``.
"""

import logging
import secrets
from collections.abc import AsyncGenerator

from fastapi import Depends, Header

from jobboard.core.config import settings
from jobboard.core.exceptions import bad_request_exception, unauthorized_exception
from jobboard.core.security import TokenIssuer, get_token_issuer
from jobboard.services.applicant_service import ApplicantService, get_applicant_service
from jobboard.services.auth_service import AuthService
from jobboard.services.email import EmailSender, MailgunClient
from jobboard.services.geocoding import Geocoder, ZipCodeClient

logger = logging.getLogger(__name__)


async def get_email_sender() -> AsyncGenerator[EmailSender, None]:
    """Dependency for the e-mail collaborator."""
    client = MailgunClient(
        domain=settings.mailgun_domain,
        api_key=settings.mailgun_api_key,
        sender=settings.mail_sender,
        product_name=settings.product_name,
        base_url=settings.mailgun_base_url,
        timeout=settings.outbound_timeout_seconds,
    )
    try:
        yield client
    finally:
        await client.close()


async def get_geocoder() -> AsyncGenerator[Geocoder, None]:
    """Dependency for the geocoding collaborator."""
    client = ZipCodeClient(
        api_key=settings.zipcode_api_key,
        base_url=settings.zipcode_base_url,
        timeout=settings.outbound_timeout_seconds,
    )
    try:
        yield client
    finally:
        await client.close()


def get_auth_service(
    applicants: ApplicantService = Depends(get_applicant_service),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
    email_sender: EmailSender = Depends(get_email_sender),
) -> AuthService:
    """Create auth service with dependencies."""
    return AuthService(applicants, token_issuer, email_sender)


def require_api_key(x_api_key: str | None = Header(default=None)) -> None:
    """Reject callers that do not present the configured client API key."""
    if not x_api_key:
        raise bad_request_exception()

    if not secrets.compare_digest(x_api_key.encode("utf-8"), settings.api_key.encode("utf-8")):
        logger.info("Rejected request with invalid API key")
        raise unauthorized_exception("Invalid API key")


def get_current_applicant_id(
    authorization: str | None = Header(default=None),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> str:
    """Resolve the applicant public id from the bearer token.

    A missing or invalid token is a bad request, not an anonymous caller.
    """
    if not authorization:
        raise bad_request_exception()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise bad_request_exception()

    public_id = token_issuer.validate(token.strip())
    if not public_id:
        logger.info("Rejected request with invalid bearer token")
        raise bad_request_exception()
    return public_id
