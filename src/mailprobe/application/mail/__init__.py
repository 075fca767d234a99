"""Application mail – records, outbound messages, matching and the send port."""
from mailprobe.application.mail.addresses import (
    DefaultAddressFormatter,
    EmailAddressFormatter,
    EmailMessageField,
)
from mailprobe.application.mail.headers import (
    assert_headers_exist,
    header_line,
    header_lines,
    missing_headers,
)
from mailprobe.application.mail.matcher import Matcher, matches
from mailprobe.application.mail.message import (
    ALLOWED_HEADERS,
    BLOCKED_ATTACHMENT_EXTENSIONS,
    Attachment,
    MailMessage,
)
from mailprobe.application.mail.record import MessageRecord
from mailprobe.application.mail.sender import (
    UNAUTHORIZED_SENDER,
    Accepted,
    MailService,
    Rejected,
    SendResult,
    assert_sender_authorized,
    assert_sender_unauthorized,
    require_accepted,
)

__all__ = [
    "ALLOWED_HEADERS",
    "BLOCKED_ATTACHMENT_EXTENSIONS",
    "UNAUTHORIZED_SENDER",
    "Accepted",
    "Attachment",
    "DefaultAddressFormatter",
    "EmailAddressFormatter",
    "EmailMessageField",
    "MailMessage",
    "MailService",
    "Matcher",
    "MessageRecord",
    "Rejected",
    "SendResult",
    "assert_headers_exist",
    "assert_sender_authorized",
    "assert_sender_unauthorized",
    "header_line",
    "header_lines",
    "matches",
    "missing_headers",
    "require_accepted",
]
