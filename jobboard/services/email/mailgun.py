"""Mailgun e-mail delivery."""

import logging

import httpx

from jobboard.core.exceptions import DependencyError
from jobboard.models.applicant import Applicant
from jobboard.services.email.base import EmailSender

logger = logging.getLogger(__name__)


class MailgunClient(EmailSender):
    """Sends messages through the Mailgun HTTP API."""

    SERVICE = "Mailgun"

    def __init__(
        self,
        domain: str,
        api_key: str,
        sender: str,
        product_name: str,
        base_url: str = "https://api.mailgun.net/v3",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.domain = domain
        self.sender = sender
        self.product_name = product_name
        self.client = httpx.AsyncClient(
            base_url=base_url,
            auth=("api", api_key),
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    def build_welcome_message(self, applicant: Applicant, password: str) -> dict[str, str]:
        return {
            "from": self.sender,
            "to": applicant.email,
            "subject": f"Welcome to {self.product_name}!",
            "text": (
                f"Thank you for joining {self.product_name}, {applicant.first_name}!\n"
                f"Your temporary password is {password}"
            ),
        }

    async def send_message(self, message: dict[str, str]) -> str:
        """Post a message and return the Mailgun message id."""
        if not self.domain:
            raise DependencyError(self.SERVICE, "Mailgun domain is not configured")

        try:
            response = await self.client.post(f"/{self.domain}/messages", data=message)
        except httpx.TimeoutException as e:
            logger.error(f"Mailgun request timed out: {e}")
            raise DependencyError(self.SERVICE, "Request timed out") from e
        except httpx.RequestError as e:
            logger.error(f"Mailgun network error: {e}")
            raise DependencyError(self.SERVICE, f"Network error: {e}") from e

        if response.status_code >= 400:
            logger.error(
                f"Mailgun rejected message: {response.status_code} {response.text}"
            )
            raise DependencyError(
                self.SERVICE, "Message rejected", status_code=response.status_code
            )

        try:
            message_id = response.json().get("id", "")
        except ValueError as e:
            raise DependencyError(self.SERVICE, "Invalid response body") from e
        logger.info(f"Mailgun accepted message {message_id}")
        return message_id

    async def send_welcome_message(self, applicant: Applicant, password: str) -> str:
        return await self.send_message(self.build_welcome_message(applicant, password))
