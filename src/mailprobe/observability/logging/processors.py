"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import dataclasses
from typing import Any

import structlog


def stringify_dataclasses(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor rendering dataclass values through their ``str``.

    Message records define a compact diagnostic ``__str__``; without this the
    JSON renderer would fall back to ``repr``.
    """
    for key, value in event_dict.items():
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            event_dict[key] = str(value)
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger", "stringify_dataclasses"]
