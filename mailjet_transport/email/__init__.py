"""Email delivery transports."""

from .base import EmailTransport
from .mailjet import MailjetTransport

__all__ = ["EmailTransport", "MailjetTransport"]
