"""
Submission contract models.

Pydantic models for submission records as they are stored in the log and
shown by the CLI. Unknown keys are kept so records written by newer
versions still load.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from folio.helpers.dto.submission_dto import SubmissionStatus


class SubmissionRecord(BaseModel):
    """One logged contact submission."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(min_length=1)
    created_at: str = Field(default="", alias="createdAt")
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""
    status: SubmissionStatus = SubmissionStatus.RECEIVED

    def to_record(self) -> dict[str, Any]:
        """Dump back to the on-disk shape (camelCase keys, string status)."""
        return self.model_dump(by_alias=True, mode="json")
