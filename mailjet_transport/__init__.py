"""
mailjet-transport — Mailjet delivery for already-assembled emails.

Converts an ``EmailMessage`` (sender, To/Cc/Bcc, subject, bodies,
attachments, reply-to) into a Mailjet v3 send request and posts it with
HTTP Basic auth. The consuming app retains orchestration (message
construction, templating, queueing, retries).

Quick start::

    from mailjet_transport import Address, EmailMessage, MailjetConfig, MailjetTransport

    with MailjetTransport.from_config(MailjetConfig(public_key="...", private_key="...")) as transport:
        transport.send(EmailMessage(
            subject="Welcome",
            sender=Address("noreply@example.com", "My App"),
            to={"user@example.com": "User"},
            text_body="Hello!",
            html_body="<h1>Hello!</h1>",
        ))

Bring your own client (timeouts, proxies)::

    import httpx

    transport = MailjetTransport(httpx.Client(timeout=30.0), public_key, private_key)

``send`` returns True when Mailjet accepts the request. HTTP failures
propagate as ``httpx.HTTPStatusError`` / ``httpx.TransportError``; nothing
is retried.

For testing::

    from mailjet_transport import MockTransport

    transport = MockTransport()
    transport.send(message)
    assert len(transport.sent) == 1

Module overview
---------------
- ``types``   — Address, Attachment, EmailMessage, Recipient, MailjetConfig
- ``errors``  — MailjetError, MalformedMessageError
- ``email/``  — EmailTransport protocol, MailjetTransport
- ``mock``    — MockTransport

What this library does NOT own:
- Message construction and template rendering
- Email address validation
- Queueing, retry, and transport selection
- Bounce and webhook processing
"""

from .email import EmailTransport, MailjetTransport
from .email.mailjet import REPLY_TO_HEADER, build_headers, build_payload, flatten_recipients
from .errors import MailjetError, MalformedMessageError
from .mock import MockTransport, SentEmail
from .types import MAILJET_SEND_URL, Address, Attachment, EmailMessage, MailjetConfig, Recipient

__all__ = [
    # Transports
    "EmailTransport",
    "MailjetTransport",
    "MockTransport",
    "SentEmail",
    # Payload helpers
    "build_headers",
    "build_payload",
    "flatten_recipients",
    # Types
    "Address",
    "Attachment",
    "EmailMessage",
    "MailjetConfig",
    "Recipient",
    "MAILJET_SEND_URL",
    "REPLY_TO_HEADER",
    # Errors
    "MailjetError",
    "MalformedMessageError",
]
