"""Mailjet email transport (v3 send API)."""

from __future__ import annotations

import asyncio
import base64
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from mailjet_transport.errors import MalformedMessageError
from mailjet_transport.types import MAILJET_SEND_URL, Address, Attachment, EmailMessage, MailjetConfig, Recipient

logger = logging.getLogger(__name__)

REPLY_TO_HEADER = "Headers"


class MailjetTransport:
    """Sends emails via the Mailjet v3 send API.

    The HTTP client is injected so callers control timeouts, proxies and
    pooling. HTTP errors are not caught: a non-2xx response raises
    ``httpx.HTTPStatusError`` and network failures raise
    ``httpx.TransportError``.

    Usage::

        with MailjetTransport.from_config(MailjetConfig(public_key="...", private_key="...")) as transport:
            transport.send(message)
    """

    def __init__(
        self,
        client: httpx.Client,
        public_key: str,
        private_key: str,
        *,
        api_url: str = MAILJET_SEND_URL,
    ) -> None:
        self._client = client
        self._public_key = public_key
        self._private_key = private_key
        self._api_url = api_url
        self._owns_client = False

    @classmethod
    def from_config(cls, config: MailjetConfig) -> MailjetTransport:
        """Create a transport that owns its own ``httpx.Client``."""
        transport = cls(
            httpx.Client(timeout=config.timeout),
            config.public_key,
            config.private_key,
            api_url=config.api_url,
        )
        transport._owns_client = True
        return transport

    # ── Credentials ───────────────────────────────────────────────────

    @property
    def public_key(self) -> str:
        return self._public_key

    @public_key.setter
    def public_key(self, public_key: str) -> None:
        self._public_key = public_key

    @property
    def private_key(self) -> str:
        return self._private_key

    @private_key.setter
    def private_key(self, private_key: str) -> None:
        self._private_key = private_key

    # ── Lifecycle ─────────────────────────────────────────────────────

    def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> MailjetTransport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> MailjetTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        self.close()

    # ── Sending ───────────────────────────────────────────────────────

    def send(self, message: EmailMessage) -> bool:
        """Send an email via Mailjet.

        Clears ``message.bcc`` in place before the request is made. Bcc
        recipients are still delivered to, since the recipient list is
        captured first.

        Raises:
            MalformedMessageError: The message has no sender.
            httpx.HTTPStatusError: Mailjet answered with a non-2xx status.
            httpx.TransportError: The request could not be completed.
        """
        sender = require_sender(message)
        recipients = flatten_recipients(message.to, message.cc, message.bcc)

        message.bcc = {}

        payload = _assemble_payload(message, sender, recipients)
        logger.debug("Posting Mailjet send request for %d recipients", len(recipients))
        response = self._client.post(
            self._api_url,
            json=payload,
            headers=build_headers(message),
            auth=(self._public_key, self._private_key),
        )
        response.raise_for_status()
        logger.info("Email sent via Mailjet to %d recipients: %s", len(recipients), message.subject)
        return True

    async def send_async(self, message: EmailMessage) -> bool:
        """Send an email asynchronously (runs sync send in a thread)."""
        return await asyncio.to_thread(self.send, message)


def build_payload(message: EmailMessage) -> dict[str, Any]:
    """Build the Mailjet request body for ``message`` without sending it.

    Unlike ``MailjetTransport.send`` this leaves ``message.bcc`` untouched,
    so ``Text-part`` is rendered from the message as it currently stands.
    """
    sender = require_sender(message)
    recipients = flatten_recipients(message.to, message.cc, message.bcc)
    return _assemble_payload(message, sender, recipients)


def build_headers(message: EmailMessage) -> dict[str, bytes]:
    """Build the custom request headers carrying the message's Reply-To.

    Mailjet reads the reply-to address from a request header named
    ``Headers``. Values are UTF-8 encoded so non-ASCII display names survive.
    """
    if message.reply_to is None:
        return {}
    return {REPLY_TO_HEADER: message.reply_to.formatted().encode("utf-8")}


def flatten_recipients(*address_maps: Mapping[str, str]) -> list[Recipient]:
    """Merge address maps into one recipient list, in order, without deduplication."""
    return [Recipient(email=email, name=name) for addresses in address_maps for email, name in addresses.items()]


def encode_attachment(attachment: Attachment) -> dict[str, str]:
    return {
        "Content-type": attachment.content_type,
        "Filename": attachment.filename,
        "content": base64.b64encode(attachment.content).decode("ascii"),
    }


def require_sender(message: EmailMessage) -> Address:
    if message.sender is None:
        raise MalformedMessageError("Message has no sender", field="sender")
    return message.sender


def _assemble_payload(message: EmailMessage, sender: Address, recipients: list[Recipient]) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "FromEmail": sender.email,
        "FromName": sender.name,
        "Subject": message.subject,
        "Text-part": message.as_string(),
        "Html-part": message.html_body,
        "Recipients": [recipient.to_dict() for recipient in recipients],
    }
    if message.attachments:
        payload["Attachments"] = [encode_attachment(attachment) for attachment in message.attachments]
    return payload
