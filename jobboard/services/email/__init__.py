"""E-mail delivery collaborators."""

from jobboard.services.email.base import EmailSender
from jobboard.services.email.mailgun import MailgunClient

__all__ = ["EmailSender", "MailgunClient"]
