"""Core types for the Mailjet transport library."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from email import policy
from email.message import EmailMessage as MIMEMessage

MAILJET_SEND_URL = "https://api.mailjet.com/v3/send"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Raw UTF-8 headers, "\n" line endings
_MIME_POLICY = policy.default.clone(utf8=True)

_NAME_SPECIALS = re.compile(r'[][\\()<>@,:;".]')


def unfold(value: str) -> str:
    """Join a multi-line value into one header-safe line."""
    return " ".join(value.splitlines())


@dataclass(frozen=True, slots=True)
class Address:
    """A single email address with an optional display name."""

    email: str
    name: str = ""

    def formatted(self) -> str:
        """Render as ``Name <email>``, or the bare address when unnamed.

        Line breaks are folded into spaces. Nothing else is validated.
        """
        email = unfold(self.email)
        return f"{unfold(self.name)} <{email}>" if self.name else email


@dataclass(frozen=True, slots=True)
class Attachment:
    """A file attached to an email."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class Recipient:
    """One entry of the flattened To/Cc/Bcc recipient list."""

    email: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"Email": self.email, "Name": self.name}


# ── Message ───────────────────────────────────────────────────────────


@dataclass(slots=True)
class EmailMessage:
    """An already-assembled outgoing email.

    Recipient maps go from email address to display name. The record is
    mutable: transports clear ``bcc`` in place once the recipient list has
    been captured, so a message must not be shared between concurrent sends.

    Only one reply-to address is supported.
    """

    subject: str
    sender: Address | None = None
    to: dict[str, str] = field(default_factory=dict)
    cc: dict[str, str] = field(default_factory=dict)
    bcc: dict[str, str] = field(default_factory=dict)
    text_body: str = ""
    html_body: str = ""
    reply_to: Address | None = None
    attachments: list[Attachment] = field(default_factory=list)

    def as_string(self) -> str:
        """Serialize the whole message (headers and MIME body) as plain text.

        Bcc is never written out. Non-ASCII headers are kept as UTF-8 and
        line breaks inside header values are folded into spaces.
        """
        mime = MIMEMessage(policy=_MIME_POLICY)
        mime["Subject"] = unfold(self.subject)
        if self.sender is not None:
            mime["From"] = _format_address(self.sender.email, self.sender.name)
        if self.to:
            mime["To"] = _format_address_list(self.to)
        if self.cc:
            mime["Cc"] = _format_address_list(self.cc)
        if self.reply_to is not None:
            mime["Reply-To"] = _format_address(self.reply_to.email, self.reply_to.name)

        mime.set_content(self.text_body)
        if self.html_body:
            mime.add_alternative(self.html_body, subtype="html")
        for attachment in self.attachments:
            maintype, _, subtype = attachment.content_type.partition("/")
            if not subtype:
                maintype, subtype = "application", "octet-stream"
            mime.add_attachment(
                attachment.content,
                maintype=maintype,
                subtype=subtype,
                filename=unfold(attachment.filename),
            )
        return mime.as_string()


def _format_address(email: str, name: str) -> str:
    name = unfold(name)
    if _NAME_SPECIALS.search(name):
        name = '"{}"'.format(name.replace("\\", "\\\\").replace('"', '\\"'))
    email = unfold(email)
    return f"{name} <{email}>" if name else email


def _format_address_list(addresses: dict[str, str]) -> str:
    return ", ".join(_format_address(email, name) for email, name in addresses.items())


# ── Provider configuration ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MailjetConfig:
    """Configuration for creating a Mailjet transport."""

    public_key: str
    private_key: str
    api_url: str = MAILJET_SEND_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
