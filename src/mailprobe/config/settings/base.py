"""Config settings – Settings base class and the conformance-run settings."""
from __future__ import annotations

import dataclasses
import enum
from typing import ClassVar

from mailprobe.config.errors import InvalidSettingValueError


class Environment(enum.StrEnum):
    """Platform flavour the conformance run targets."""

    APPSPOT = "appspot"
    CAPEDWARF = "capedwarf"
    SDK = "sdk"


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class MailProbeSettings(Settings):
    """Everything a mail scenario needs to know about the platform under test.

    Passed explicitly to :class:`~mailprobe.testing.scenario.MailScenario`;
    nothing in the toolkit reads platform identity from globals.
    """

    _prefix: ClassVar[str] = "MAILPROBE"

    app_id: str
    mail_gateway: str = "appspotmail.com"
    environment: str = Environment.APPSPOT.value
    poll_timeout_seconds: float = 45.0
    poll_interval_seconds: float = 0.25
    admin_email: str | None = None

    def _validate(self) -> None:
        if not self.app_id:
            raise InvalidSettingValueError("app_id", self.app_id, "must not be empty")
        if self.poll_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "poll_timeout_seconds", self.poll_timeout_seconds, "must be positive"
            )
        if self.poll_interval_seconds <= 0:
            raise InvalidSettingValueError(
                "poll_interval_seconds", self.poll_interval_seconds, "must be positive"
            )
        try:
            self.environment = Environment(self.environment.lower()).value
        except ValueError:
            raise InvalidSettingValueError(
                "environment",
                self.environment,
                f"expected one of {[e.value for e in Environment]}",
            ) from None

    @property
    def mail_domain(self) -> str:
        """Domain every app-owned address lives under."""
        return f"{self.app_id}.{self.mail_gateway}"


__all__ = ["Environment", "MailProbeSettings", "Settings"]
