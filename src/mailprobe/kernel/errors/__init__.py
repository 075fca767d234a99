"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    MailProbeError
    ├── ApplicationError          (application.py)
    │   ├── PollStateError
    │   ├── SendRejectedError
    │   └── ConfigError           (mailprobe.config.validation)
    └── ExpectationFailedError    (expectation.py, also an AssertionError)
        ├── MatchTimeoutError
        ├── MissingHeadersError
        ├── SenderRejectedError
        └── SenderNotRejectedError
"""

from mailprobe.kernel.errors.application import (
    ApplicationError,
    PollStateError,
    SendRejectedError,
)
from mailprobe.kernel.errors.base import MailProbeError
from mailprobe.kernel.errors.expectation import (
    ExpectationFailedError,
    MatchTimeoutError,
    MissingHeadersError,
    SenderNotRejectedError,
    SenderRejectedError,
)

__all__ = [
    "ApplicationError",
    "ExpectationFailedError",
    "MailProbeError",
    "MatchTimeoutError",
    "MissingHeadersError",
    "PollStateError",
    "SendRejectedError",
    "SenderNotRejectedError",
    "SenderRejectedError",
]
