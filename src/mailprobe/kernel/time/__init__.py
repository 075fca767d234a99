"""Kernel time – clock port and implementations."""
from mailprobe.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
