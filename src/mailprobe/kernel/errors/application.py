"""Application-layer errors – misuse of the toolkit and upstream rejections."""

from __future__ import annotations

from typing import Any

from mailprobe.kernel.errors.base import MailProbeError


class ApplicationError(MailProbeError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class PollStateError(ApplicationError):
    """A poll request was run when it was no longer pending."""

    default_code = "poll_state_error"

    def __init__(self, state: str, **kwargs: Any) -> None:
        super().__init__(
            f"Poll request cannot run from state {state!r}; create a new request to poll again",
            **kwargs,
        )
        self.state = state


class SendRejectedError(ApplicationError):
    """The mail service rejected a send; ``reason`` is passed through unchanged."""

    default_code = "send_rejected"

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(reason, **kwargs)
        self.reason = reason


__all__ = ["ApplicationError", "PollStateError", "SendRejectedError"]
