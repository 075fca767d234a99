"""Application mail – MailService port and its tagged send result.

A send either comes back :class:`Accepted` or :class:`Rejected` with the
service's reason; callers match on the variant::

    match service.send(message):
        case Rejected(reason=reason) if UNAUTHORIZED_SENDER in reason:
            ...
        case Accepted(message_id=mid):
            ...
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

from mailprobe.application.mail.message import MailMessage
from mailprobe.kernel.errors import SendRejectedError, SenderNotRejectedError, SenderRejectedError

__all__ = [
    "UNAUTHORIZED_SENDER",
    "Accepted",
    "MailService",
    "Rejected",
    "SendResult",
    "assert_sender_authorized",
    "assert_sender_unauthorized",
    "require_accepted",
]

UNAUTHORIZED_SENDER: Final = "Unauthorized Sender"


@dataclass(frozen=True)
class Accepted:
    """The service took the message for delivery."""

    message_id: str

    def is_accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """The service refused the message synchronously."""

    reason: str

    def is_accepted(self) -> bool:
        return False


type SendResult = Accepted | Rejected


@runtime_checkable
class MailService(Protocol):
    """Port: the platform's mail-sending API."""

    def send(self, message: MailMessage) -> SendResult:
        """Send *message* to its recipients."""
        ...

    def send_to_admins(self, message: MailMessage) -> SendResult:
        """Send *message* to the application's administrators, ignoring its recipients."""
        ...


def require_accepted(result: SendResult) -> str:
    """Return the message id, or raise the rejection unchanged."""
    match result:
        case Accepted(message_id=message_id):
            return message_id
        case Rejected(reason=reason):
            raise SendRejectedError(reason)
    raise TypeError(f"Unexpected send result {result!r}")


def assert_sender_authorized(result: SendResult, sender: str) -> None:
    """Fail if the service refused *sender* as unauthorized.

    Any other rejection is not about the sender and propagates as
    :class:`SendRejectedError`.
    """
    match result:
        case Rejected(reason=reason) if UNAUTHORIZED_SENDER in reason:
            raise SenderRejectedError(sender, reason)
        case Rejected(reason=reason):
            raise SendRejectedError(reason)


def assert_sender_unauthorized(result: SendResult) -> None:
    """Fail unless the service refused the sender as unauthorized."""
    match result:
        case Rejected(reason=reason) if UNAUTHORIZED_SENDER in reason:
            return
        case Rejected(reason=reason):
            raise SenderNotRejectedError(
                f"Expected rejection containing {UNAUTHORIZED_SENDER!r}, got {reason!r}"
            )
        case _:
            raise SenderNotRejectedError(
                f"Expected rejection containing {UNAUTHORIZED_SENDER!r}, but the send was accepted"
            )
