"""Section merging and document summaries.

Pure functions over the site document (a dict of section id -> section value).
Nothing here reads or writes files; workflows hand documents in and out.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from folio.components.normalization.section_specs_comp import TOGGLEABLE_SECTIONS
from folio.helpers.dto.content_dto import DocumentSummary


def merge_section(previous: Any, value: Mapping[str, Any]) -> dict[str, Any]:
    """
    Shallow-merge a normalized value over the previous section value.

    Keys the normalizer did not produce keep their previous values. A
    previous value that is not an object is discarded.
    """
    base = dict(previous) if isinstance(previous, Mapping) else {}
    base.update(value)
    return base


def apply_section(document: Mapping[str, Any], section_id: str, section: Any) -> dict[str, Any]:
    """Return a copy of document with section_id replaced by section."""
    updated = dict(document)
    updated[section_id] = section
    return updated


def is_section_enabled(document: Mapping[str, Any] | None, section_id: str) -> bool:
    """A section is shown unless it is an object with enabled set to false."""
    section = document.get(section_id) if isinstance(document, Mapping) else None
    if not isinstance(section, Mapping):
        return True
    return section.get("enabled") is not False


def _count(document: Mapping[str, Any], section_id: str, key: str) -> int:
    section = document.get(section_id)
    if not isinstance(section, Mapping):
        return 0
    items = section.get(key)
    return len(items) if isinstance(items, list) else 0


def summarize_document(document: Mapping[str, Any], submission_count: int) -> DocumentSummary:
    """Count list items per section and enabled sections for the overview screen."""
    return DocumentSummary(
        nav_links=_count(document, "nav", "links"),
        projects=_count(document, "projects", "cards"),
        casestudies=_count(document, "casestudies", "cards"),
        experience=_count(document, "experience", "items"),
        certifications=_count(document, "certifications", "cards"),
        blog_posts=_count(document, "blog", "posts"),
        submissions=submission_count,
        enabled_sections=sum(1 for sid in TOGGLEABLE_SECTIONS if is_section_enabled(document, sid)),
    )
