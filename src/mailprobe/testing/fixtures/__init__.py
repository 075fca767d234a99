"""Testing fixtures – pytest fixtures for the in-memory mail doubles.

Register them in your ``conftest.py``::

    pytest_plugins = ["mailprobe.testing.fixtures"]
"""
from mailprobe.testing.fixtures.mail import (
    frozen_clock,
    mail_scenario,
    mail_service,
    mail_settings,
    record_store,
)

__all__ = [
    "frozen_clock",
    "mail_scenario",
    "mail_service",
    "mail_settings",
    "record_store",
]
