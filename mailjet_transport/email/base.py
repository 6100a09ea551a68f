"""Base protocol for email transports."""

from __future__ import annotations

from typing import Protocol

from mailjet_transport.types import EmailMessage


class EmailTransport(Protocol):
    """Interface that all email transports must implement."""

    def send(self, message: EmailMessage) -> bool:
        """Send an email, returning True once the provider accepted it."""
        ...

    async def send_async(self, message: EmailMessage) -> bool:
        """Send an email asynchronously."""
        ...
