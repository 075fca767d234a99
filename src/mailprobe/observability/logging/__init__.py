"""Observability – structlog configuration and logger helper."""
from mailprobe.observability.logging.factory import configure_logging
from mailprobe.observability.logging.processors import get_logger, stringify_dataclasses

__all__ = ["configure_logging", "get_logger", "stringify_dataclasses"]
