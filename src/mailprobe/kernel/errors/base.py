"""Root error class for the mailprobe error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class MailProbeError(Exception):
    """Base for every error mailprobe raises.

    Args:
        message: Shown to the person reading the test report.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra diagnostic context, serialisable for log lines.
    """

    default_code: str = "mailprobe_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """``code``, ``message`` and ``detail`` as a plain dict."""
        return {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


__all__ = ["MailProbeError"]
