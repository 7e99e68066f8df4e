"""Content workflows package."""

from .update_section_wf import replace_document_wf, replace_section_wf, update_section_wf

__all__ = [
    "replace_document_wf",
    "replace_section_wf",
    "update_section_wf",
]
