"""
Submission domain DTOs.

The lifecycle vocabulary for logged contact submissions.

Rules:
- Import only stdlib and typing (no folio.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from enum import Enum


class SubmissionStatus(str, Enum):
    """
    Lifecycle labels for a submission.

    received -> {sent, send_failed, email_not_configured}; never back to received.
    """

    RECEIVED = "received"
    SENT = "sent"
    SEND_FAILED = "send_failed"
    EMAIL_NOT_CONFIGURED = "email_not_configured"


# Statuses a patch may move a record into
PATCHABLE_STATUSES = frozenset(
    {
        SubmissionStatus.SENT.value,
        SubmissionStatus.SEND_FAILED.value,
        SubmissionStatus.EMAIL_NOT_CONFIGURED.value,
    }
)

# Keys every logged record carries; anything else is a lifecycle extra
SUBMISSION_FIELDS = ("id", "createdAt", "name", "email", "subject", "message", "status")
