"""Content package."""

from folio.components.content.section_merge_comp import (
    apply_section,
    is_section_enabled,
    merge_section,
    summarize_document,
)

__all__ = ["apply_section", "is_section_enabled", "merge_section", "summarize_document"]
