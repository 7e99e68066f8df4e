"""Contract models for the CLI."""

from .content_types import DocumentSummaryModel
from .submission_types import SubmissionRecord

__all__ = ["DocumentSummaryModel", "SubmissionRecord"]
