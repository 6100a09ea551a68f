"""Exceptions raised by the Mailjet transport library.

HTTP failures are not wrapped: ``httpx.HTTPStatusError`` and
``httpx.TransportError`` reach the caller as raised by the client.
"""

from __future__ import annotations


class MailjetError(Exception):
    """Base class for errors raised by this library."""


class MalformedMessageError(MailjetError, IndexError):
    """Raised when a message cannot be mapped to a send request."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
