"""Testing polling – wait for an asynchronously delivered record to match."""
from mailprobe.testing.polling.engine import (
    DEFAULT_TIMEOUT_SECONDS,
    MatchPoller,
    PollRequest,
    PollState,
    poll_for_match,
)
from mailprobe.testing.polling.store import (
    BOUNCE_CATEGORY,
    BOUNCE_SUBJECT_PREFIX,
    MAIL_CATEGORY,
    PollingRecordStore,
    RecordStore,
)

__all__ = [
    "BOUNCE_CATEGORY",
    "BOUNCE_SUBJECT_PREFIX",
    "DEFAULT_TIMEOUT_SECONDS",
    "MAIL_CATEGORY",
    "MatchPoller",
    "PollRequest",
    "PollState",
    "PollingRecordStore",
    "RecordStore",
    "poll_for_match",
]
