"""
Workflows package.
"""

from .content.update_section_wf import replace_document_wf, replace_section_wf, update_section_wf
from .submissions.record_submission_wf import record_submission_wf

__all__ = [
    "record_submission_wf",
    "replace_document_wf",
    "replace_section_wf",
    "update_section_wf",
]
