"""
mailprobe – conformance toolkit for mail-sending APIs.

Import path convention::

    from mailprobe.application.mail import MessageRecord, matches
    from mailprobe.testing.polling import poll_for_match
    from mailprobe.testing.fakes import InMemoryMailService, InMemoryRecordStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
