"""Submission workflows package."""

from .record_submission_wf import new_submission_id, record_submission_wf

__all__ = [
    "new_submission_id",
    "record_submission_wf",
]
