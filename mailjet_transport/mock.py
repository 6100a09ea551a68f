"""Mock email transport for testing.

Records all sent messages and either accepts them or raises a configured
error. Useful for unit testing code that depends on email delivery without
hitting Mailjet.
"""

from __future__ import annotations

from dataclasses import dataclass

from .email.mailjet import flatten_recipients, require_sender
from .types import EmailMessage, Recipient


@dataclass
class SentEmail:
    """Record of a message sent through the MockTransport."""

    message: EmailMessage
    recipients: list[Recipient]


class MockTransport:
    """Test transport that records messages instead of delivering them.

    Usage::

        transport = MockTransport()
        assert transport.send(message)
        assert transport.sent[0].message is message

    Simulate a provider failure::

        transport = MockTransport(error=RuntimeError("quota exceeded"))
        transport.send(message)  # raises RuntimeError

    Like ``MailjetTransport``, ``message.bcc`` is cleared on send and the
    recorded recipients still include the Bcc addresses.
    """

    def __init__(self, *, error: Exception | None = None) -> None:
        self.error = error
        self.sent: list[SentEmail] = []

    def send(self, message: EmailMessage) -> bool:
        require_sender(message)
        recipients = flatten_recipients(message.to, message.cc, message.bcc)
        message.bcc = {}

        self.sent.append(SentEmail(message=message, recipients=recipients))
        if self.error is not None:
            raise self.error
        return True

    async def send_async(self, message: EmailMessage) -> bool:
        return self.send(message)

    def reset(self) -> None:
        """Clear all recorded messages."""
        self.sent.clear()
