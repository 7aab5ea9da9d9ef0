"""Base class for e-mail delivery providers."""

from abc import ABC, abstractmethod

from jobboard.models.applicant import Applicant


class EmailSender(ABC):
    """Abstract base class for e-mail delivery."""

    @abstractmethod
    async def send_welcome_message(self, applicant: Applicant, password: str) -> str:
        """Send the sign-up welcome message with the temporary password.

        Args:
            applicant: Newly created applicant
            password: Temporary plaintext password

        Returns:
            Provider message id

        Raises:
            DependencyError: if the provider rejects or cannot be reached
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None
