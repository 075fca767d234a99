"""Application mail – MessageRecord value object.

A ``MessageRecord`` is the comparable snapshot of a message's externally
visible fields. Scenarios build one as the expectation before sending; the
record store builds another when the platform reports what it received.
"""
from __future__ import annotations

import dataclasses
from typing import Iterable

__all__ = ["MessageRecord"]


def _freeze_to(value: str | Iterable[str] | None) -> str | tuple[str, ...] | None:
    if value is None or isinstance(value, str):
        return value
    return tuple(value)


@dataclasses.dataclass(frozen=True)
class MessageRecord:
    """Snapshot of an email's subject, addresses, content and header lines.

    No validation happens here: an empty subject or a malformed address is a
    legitimate expectation (the mail service is the one that rejects it).

    ``body`` and ``segments`` are alternatives. ``body=None`` means "never
    set", which makes comparison fall back to the multipart ``segments``;
    ``body=""`` is a set, empty body.
    """

    subject: str | None = None
    sender: str | None = None
    to: str | tuple[str, ...] | None = None
    cc: str | None = None
    bcc: str | None = None
    reply_to: str | None = None
    body: str | None = None
    segments: tuple[str, ...] = ()
    headers: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "to", _freeze_to(self.to))
        object.__setattr__(self, "segments", tuple(self.segments))
        object.__setattr__(self, "headers", frozenset(self.headers))

    def is_reply_to_set(self) -> bool:
        return self.reply_to is not None

    def is_body_set(self) -> bool:
        return self.body is not None

    @property
    def effective_reply_to(self) -> str | None:
        """Explicit reply-to, else the sender (what a receiver replies to)."""
        return self.reply_to if self.is_reply_to_set() else self.sender

    def with_subject(self, subject: str) -> "MessageRecord":
        return dataclasses.replace(self, subject=subject)

    def __str__(self) -> str:
        parts = [
            f"subject={self.subject!r}",
            f"from={self.sender!r}",
            f"to={self.to!r}",
            f"cc={self.cc!r}",
            f"bcc={self.bcc!r}",
            f"replyTo={self.reply_to!r}",
        ]
        if self.is_body_set():
            parts.append(f"body={self.body!r}")
        else:
            parts.append(f"segments={list(self.segments)!r}")
        parts.append(f"headers={sorted(self.headers)!r}")
        return "MessageRecord{" + ", ".join(parts) + "}"
