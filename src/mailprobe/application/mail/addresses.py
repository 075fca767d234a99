"""Application mail – test address formatting."""
from __future__ import annotations

import enum
from typing import Protocol, runtime_checkable

__all__ = ["DefaultAddressFormatter", "EmailAddressFormatter", "EmailMessageField"]


class EmailMessageField(enum.Enum):
    """Which field of a message an address is generated for."""

    FROM = "from"
    TO = "to"
    CC = "cc"
    BCC = "bcc"
    REPLY_TO = "reply_to"


@runtime_checkable
class EmailAddressFormatter(Protocol):
    """Port: build the address a test user should use.

    Deployments whose inbound gateway routes on something other than
    ``user@app.gateway`` plug in their own formatter.
    """

    def format(self, user: str, app_id: str, gateway: str, field: EmailMessageField) -> str: ...


class DefaultAddressFormatter:
    """``user@app_id.gateway`` regardless of field."""

    def format(self, user: str, app_id: str, gateway: str, field: EmailMessageField) -> str:  # noqa: ARG002
        return f"{user}@{app_id}.{gateway}"
