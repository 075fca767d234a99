"""Application mail – expectation matcher.

:func:`matches` decides whether an observed record satisfies an expected
one. It is a plain predicate so callers can pass their own function of the
same shape wherever a :data:`Matcher` is accepted.
"""
from __future__ import annotations

from typing import Callable

from mailprobe.application.mail.record import MessageRecord
from mailprobe.observability.logging import get_logger

__all__ = ["Matcher", "matches"]

Matcher = Callable[[MessageRecord, MessageRecord], bool]

logger = get_logger(__name__)


def _segments_match(expected: MessageRecord, candidate: MessageRecord) -> bool:
    for index, expected_part in enumerate(expected.segments):
        if index >= len(candidate.segments):
            logger.debug(
                "matcher.segment_missing",
                index=index,
                expected_count=len(expected.segments),
                actual_count=len(candidate.segments),
            )
            return False
        if expected_part.strip() != candidate.segments[index].strip():
            return False
    return True


def matches(expected: MessageRecord, candidate: MessageRecord) -> bool:
    """Return ``True`` when *candidate* satisfies *expected*.

    Addresses and subject must be equal (``None`` equals ``None``); reply-to
    is compared against the expectation's effective reply-to. Then the body
    is compared exactly when the expectation sets one, otherwise each
    expected multipart segment is compared with the candidate's segment at
    the same position, ignoring surrounding whitespace. Headers are checked
    separately by :func:`~mailprobe.application.mail.headers.assert_headers_exist`.
    """
    if (
        expected.subject != candidate.subject
        or expected.sender != candidate.sender
        or expected.to != candidate.to
        or expected.cc != candidate.cc
        or expected.effective_reply_to != candidate.reply_to
    ):
        return False

    if expected.is_body_set():
        return expected.body == candidate.body
    return _segments_match(expected, candidate)
