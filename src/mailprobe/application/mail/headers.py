"""Application mail – header-line verification."""
from __future__ import annotations

from typing import Iterable, Mapping

from mailprobe.application.mail.record import MessageRecord
from mailprobe.kernel.errors import MissingHeadersError

__all__ = ["assert_headers_exist", "header_line", "header_lines", "missing_headers"]


def header_line(name: str, value: str) -> str:
    return f"{name}: {value}"


def header_lines(headers: Mapping[str, str]) -> list[str]:
    """Render ``{"List-Id": "x"}`` as ``["List-Id: x"]``, preserving order."""
    return [header_line(name, value) for name, value in headers.items()]


def missing_headers(record: MessageRecord, expected_lines: Iterable[str]) -> list[str]:
    return [line for line in expected_lines if line not in record.headers]


def assert_headers_exist(record: MessageRecord, expected_lines: Iterable[str]) -> None:
    """Require every expected ``"Name: Value"`` line to occur in *record*.

    Every missing line is collected before failing, and the failure carries
    the record's full header collection.

    Raises:
        MissingHeadersError: at least one expected line was absent.
    """
    missing = missing_headers(record, expected_lines)
    if missing:
        raise MissingHeadersError(missing, record.headers)
