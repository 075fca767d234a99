"""Expectation failures – raised where a conformance check does not hold.

They subclass :class:`AssertionError` so pytest reports them as test
failures rather than errors.
"""

from __future__ import annotations

from typing import Any, Iterable

from mailprobe.kernel.errors.base import MailProbeError


class ExpectationFailedError(MailProbeError, AssertionError):
    """An observed outcome did not satisfy the expectation."""

    default_code = "expectation_failed"


class MatchTimeoutError(ExpectationFailedError):
    """No observed record matched the expectation before the deadline."""

    default_code = "match_timeout"

    def __init__(
        self,
        expected: Any,
        timeout_seconds: float,
        category: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"No matching message found in {category!r} records after "
            f"{timeout_seconds:g} seconds. Expected: {expected}",
            detail={"expected": str(expected), "timeout_seconds": timeout_seconds, "category": category},
            **kwargs,
        )
        self.expected = expected
        self.timeout_seconds = timeout_seconds
        self.category = category


class MissingHeadersError(ExpectationFailedError):
    """One or more expected header lines were absent.

    All missing lines are reported together with the full observed header
    collection.
    """

    default_code = "missing_headers"

    def __init__(self, missing: list[str], actual: Iterable[str], **kwargs: Any) -> None:
        self.missing = list(missing)
        self.actual = sorted(actual)
        errors = [f"{line}: was not found." for line in self.missing]
        errors.append(f"Actual: {self.actual}")
        super().__init__(
            "[" + ", ".join(errors) + "]",
            detail={"missing": self.missing, "actual": self.actual},
            **kwargs,
        )


class SenderRejectedError(ExpectationFailedError):
    """A sender expected to be authorized was refused by the mail service."""

    default_code = "sender_rejected"

    def __init__(self, sender: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Could not send mail with sender set to {sender!r}. Got rejection: {reason}",
            **kwargs,
        )
        self.sender = sender
        self.reason = reason


class SenderNotRejectedError(ExpectationFailedError):
    """A sender expected to be unauthorized was not refused."""

    default_code = "sender_not_rejected"


__all__ = [
    "ExpectationFailedError",
    "MatchTimeoutError",
    "MissingHeadersError",
    "SenderNotRejectedError",
    "SenderRejectedError",
]
