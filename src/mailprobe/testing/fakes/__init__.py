"""Testing fakes – in-memory doubles for the mail service and record store."""
from mailprobe.testing.fakes.mail_service import InMemoryMailService, html_to_text
from mailprobe.testing.fakes.record_store import InMemoryRecordStore

__all__ = [
    "InMemoryMailService",
    "InMemoryRecordStore",
    "html_to_text",
]
