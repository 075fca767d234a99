"""Testing polling – poll-until-match engine.

Sending mail and observing it are decoupled: the platform records what it
received some time later. A :class:`PollRequest` bridges the two by asking a
:class:`~mailprobe.testing.polling.store.RecordStore` for the first record
the matcher accepts, within a bounded wait.

Lifecycle::

    PENDING ──run()──> POLLING ──match──> MATCHED
                          ├────deadline──> TIMED_OUT
                          └──store / matcher error──> FAILED

Finished requests are not resumable; build a new one to poll again. Only
the reads repeat, the action that produced the mail is never retried here.
"""
from __future__ import annotations

import asyncio
import enum
import time
from typing import Final

from mailprobe.application.mail import Matcher, MessageRecord, matches
from mailprobe.kernel.errors import MatchTimeoutError, PollStateError
from mailprobe.observability.logging import get_logger
from mailprobe.testing.polling.store import MAIL_CATEGORY, RecordStore

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "MatchPoller",
    "PollRequest",
    "PollState",
    "poll_for_match",
]

DEFAULT_TIMEOUT_SECONDS: Final = 45.0

logger = get_logger(__name__)


class PollState(enum.Enum):
    PENDING = "pending"
    POLLING = "polling"
    MATCHED = "matched"
    TIMED_OUT = "timed_out"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PollState.MATCHED, PollState.TIMED_OUT, PollState.FAILED)


class PollRequest:
    """One bounded attempt to observe a record matching *expected*."""

    def __init__(
        self,
        expected: MessageRecord,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        *,
        matcher: Matcher = matches,
        category: str = MAIL_CATEGORY,
    ) -> None:
        if timeout_seconds < 0:
            raise ValueError("timeout_seconds must not be negative")
        self.expected = expected
        self.timeout_seconds = timeout_seconds
        self.matcher = matcher
        self.category = category
        self._state = PollState.PENDING
        self._result: MessageRecord | None = None
        self._candidates_seen = 0

    @property
    def state(self) -> PollState:
        return self._state

    @property
    def result(self) -> MessageRecord | None:
        return self._result

    @property
    def candidates_seen(self) -> int:
        """How many candidate records the matcher was asked about."""
        return self._candidates_seen

    def _accept(self, candidate: MessageRecord) -> bool:
        self._candidates_seen += 1
        logger.debug("poll.candidate", category=self.category, candidate=candidate)
        return self.matcher(self.expected, candidate)

    def run(self, store: RecordStore[MessageRecord]) -> MessageRecord:
        """Block until a matching record is observed or the timeout elapses.

        Raises:
            MatchTimeoutError: nothing matched in time.
            PollStateError: the request has already been run.

        Errors raised by the store or the matcher propagate unchanged and
        leave the request ``FAILED``.
        """
        if self._state is not PollState.PENDING:
            raise PollStateError(self._state.value)

        self._state = PollState.POLLING
        logger.info(
            "poll.started",
            category=self.category,
            timeout_seconds=self.timeout_seconds,
            expected=self.expected,
        )
        started = time.monotonic()
        try:
            record = store.poll(self.category, self.timeout_seconds, self._accept)
        except Exception:
            self._state = PollState.FAILED
            logger.exception("poll.failed", category=self.category, candidates_seen=self._candidates_seen)
            raise
        elapsed = round(time.monotonic() - started, 3)

        if record is None:
            self._state = PollState.TIMED_OUT
            logger.warning(
                "poll.timed_out",
                category=self.category,
                elapsed=elapsed,
                candidates_seen=self._candidates_seen,
                expected=self.expected,
            )
            raise MatchTimeoutError(self.expected, self.timeout_seconds, self.category)

        self._state = PollState.MATCHED
        self._result = record
        logger.info("poll.matched", category=self.category, elapsed=elapsed, record=record)
        return record

    def __repr__(self) -> str:
        return (
            f"PollRequest(category={self.category!r}, timeout_seconds={self.timeout_seconds}, "
            f"state={self._state.value!r})"
        )


class MatchPoller:
    """Store, timeout, category and matcher bound once; one request per call."""

    def __init__(
        self,
        store: RecordStore[MessageRecord],
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        category: str = MAIL_CATEGORY,
        matcher: Matcher = matches,
    ) -> None:
        self._store = store
        self.timeout_seconds = timeout_seconds
        self.category = category
        self.matcher = matcher

    def request(self, expected: MessageRecord, timeout_seconds: float | None = None) -> PollRequest:
        return PollRequest(
            expected,
            self.timeout_seconds if timeout_seconds is None else timeout_seconds,
            matcher=self.matcher,
            category=self.category,
        )

    def poll_for_match(self, expected: MessageRecord, timeout_seconds: float | None = None) -> MessageRecord:
        return self.request(expected, timeout_seconds).run(self._store)

    async def poll_for_match_async(
        self, expected: MessageRecord, timeout_seconds: float | None = None
    ) -> MessageRecord:
        """Run :meth:`poll_for_match` in a worker thread so the event loop stays free."""
        return await asyncio.to_thread(self.poll_for_match, expected, timeout_seconds)


def poll_for_match(
    store: RecordStore[MessageRecord],
    expected: MessageRecord,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    *,
    matcher: Matcher = matches,
    category: str = MAIL_CATEGORY,
) -> MessageRecord:
    """Return the first record in *store* that *matcher* accepts for *expected*.

    Raises:
        MatchTimeoutError: no record was accepted within ``timeout_seconds``;
            the message carries the expected record's diagnostic form.
    """
    return PollRequest(expected, timeout_seconds, matcher=matcher, category=category).run(store)
