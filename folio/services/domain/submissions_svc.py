"""
SubmissionService - Contact submissions lifecycle.

A submission is recorded as "received", then patched exactly once the
delivery outcome is known (sent, send_failed, email_not_configured).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from folio.helpers.dto.submission_dto import SubmissionStatus
from folio.workflows.submissions.record_submission_wf import record_submission_wf

if TYPE_CHECKING:
    from folio.helpers.dto.normalization_dto import NormalizeResult, RawFields
    from folio.persistence.submission_log import SubmissionLog

logger = logging.getLogger(__name__)


class SubmissionService:
    """Service for recording and inspecting contact submissions."""

    def __init__(self, log: SubmissionLog) -> None:
        self.log = log

    async def record_contact(self, raw: RawFields) -> NormalizeResult:
        """Validate and log an inbound contact submission."""
        return await record_submission_wf(log=self.log, raw=raw)

    async def mark_status(self, submission_id: str, status: SubmissionStatus | str) -> bool:
        """
        Record the delivery outcome of a submission.

        Returns:
            True if the record was patched, False if it is no longer in the log

        Raises:
            InvalidSubmissionStatusError: status is unknown or "received"
        """
        patched = await self.log.patch(submission_id, {"status": status})
        if not patched:
            logger.warning(f"[submissions] Status update for unknown submission {submission_id}")
        return patched

    async def recent(self, limit: int = 10) -> list[dict[str, Any]]:
        """Most recent submissions, newest first."""
        return await self.log.recent(limit)

    async def get(self, submission_id: str) -> dict[str, Any] | None:
        return await self.log.get(submission_id)

    async def count(self) -> int:
        return len(await self.log.load())
