"""Testing support – poll-until-match engine, fakes, scenario glue, fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["mailprobe.testing.fixtures"]
"""

from mailprobe.testing.fakes import InMemoryMailService, InMemoryRecordStore
from mailprobe.testing.polling import (
    BOUNCE_CATEGORY,
    BOUNCE_SUBJECT_PREFIX,
    DEFAULT_TIMEOUT_SECONDS,
    MAIL_CATEGORY,
    MatchPoller,
    PollingRecordStore,
    PollRequest,
    PollState,
    RecordStore,
    poll_for_match,
)
from mailprobe.testing.scenario import MailScenario

__all__ = [
    "BOUNCE_CATEGORY",
    "BOUNCE_SUBJECT_PREFIX",
    "DEFAULT_TIMEOUT_SECONDS",
    "MAIL_CATEGORY",
    "InMemoryMailService",
    "InMemoryRecordStore",
    "MailScenario",
    "MatchPoller",
    "PollRequest",
    "PollState",
    "PollingRecordStore",
    "RecordStore",
    "poll_for_match",
]
