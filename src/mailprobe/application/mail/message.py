"""Application mail – outbound MailMessage and Attachment."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from mailprobe.application.mail.record import MessageRecord

__all__ = [
    "ALLOWED_HEADERS",
    "BLOCKED_ATTACHMENT_EXTENSIONS",
    "Attachment",
    "MailMessage",
]

# Headers the platform lets an application set on outgoing mail.
ALLOWED_HEADERS: Final[frozenset[str]] = frozenset(
    {
        "In-Reply-To",
        "List-Id",
        "List-Unsubscribe",
        "On-Behalf-Of",
        "References",
        "Resent-Date",
        "Resent-From",
        "Resent-To",
    }
)

BLOCKED_ATTACHMENT_EXTENSIONS: Final[tuple[str, ...]] = (
    "ade", "adp", "bat", "chm", "cmd", "com", "cpl", "exe",
    "hta", "ins", "isp", "jse", "lib", "mde", "msc", "msp", "mst", "pif", "scr",
    "sct", "shb", "sys", "vb", "vbe", "vbs", "vxd", "wsc", "wsf", "wsh",
)


@dataclass(frozen=True)
class Attachment:
    """A named payload attached to an outbound message."""

    filename: str
    data: bytes

    @property
    def extension(self) -> str:
        """Lower-cased suffix after the last dot, ``""`` when there is none."""
        _, dot, ext = self.filename.rpartition(".")
        return ext.lower() if dot else ""

    def __repr__(self) -> str:  # pragma: no cover
        return f"Attachment(filename={self.filename!r}, size={len(self.data)})"


@dataclass
class MailMessage:
    """Message handed to a :class:`~mailprobe.application.mail.sender.MailService`."""

    sender: str | None = None
    to: list[str] = field(default_factory=list)
    subject: str | None = None
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    reply_to: str | None = None
    text_body: str | None = None
    html_body: str | None = None
    attachments: list[Attachment] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: MessageRecord) -> "MailMessage":
        """Seed subject, sender and recipients from an expected record."""
        if record.to is None:
            to: list[str] = []
        elif isinstance(record.to, str):
            to = [record.to]
        else:
            to = list(record.to)
        return cls(sender=record.sender, to=to, subject=record.subject)

    def all_recipients(self) -> list[str]:
        """Return combined to + cc + bcc recipient list."""
        return self.to + self.cc + self.bcc
