"""Record an inbound contact submission in the submission log."""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING

from folio.components.normalization.section_specs_comp import normalize_submission
from folio.helpers.dto.normalization_dto import Normalized, NormalizeResult, RawFields, Rejected
from folio.helpers.dto.submission_dto import SubmissionStatus
from folio.helpers.time_helper import now_iso

if TYPE_CHECKING:
    from folio.persistence.submission_log import SubmissionLog

logger = logging.getLogger(__name__)


def new_submission_id() -> str:
    """20 lowercase hex characters."""
    return secrets.token_hex(10)


async def record_submission_wf(*, log: SubmissionLog, raw: RawFields) -> NormalizeResult:
    """
    Validate a contact submission and append it with status "received".

    Delivery (email) happens elsewhere; the caller patches the status once
    it knows the outcome.

    Returns:
        Normalized(record) as logged, or Rejected (nothing logged)

    Raises:
        DocumentWriteError: the log could not be written
    """
    result = normalize_submission(raw)
    if isinstance(result, Rejected):
        return result

    record = {
        "id": new_submission_id(),
        "createdAt": now_iso(),
        **result.value,
        "status": SubmissionStatus.RECEIVED.value,
    }
    await log.append(record)
    logger.info(f"[submissions] Recorded submission {record['id']}")
    return Normalized(record)
