"""Kernel time – clocks used to stamp scenario subjects."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Source of the current instant; swap in :class:`FrozenClock` for repeatable subjects."""

    def now(self) -> datetime: ...
    def epoch_millis(self) -> int: ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def epoch_millis(self) -> int:
        return int(self.now().timestamp() * 1000)


class FrozenClock:
    """Stays at *instant* until :meth:`advance` moves it."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def epoch_millis(self) -> int:
        return int(self._instant.timestamp() * 1000)

    def advance(self, **delta: int | float) -> None:
        """Move forward by ``timedelta(**delta)``, e.g. ``advance(milliseconds=1)``."""
        self._instant += timedelta(**delta)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
