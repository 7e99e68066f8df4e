"""Verbatim JSON paths: replace one section, or the whole document, as typed.

These bypass the per-field declarations. Only the shape is checked: the text
must parse, must be a JSON object, and (for the whole document) must carry
the sections the site cannot render without.
"""

from __future__ import annotations

import json
from typing import Any

from folio.components.normalization.section_specs_comp import EDITABLE_SECTIONS
from folio.helpers.dto.normalization_dto import (
    Normalized,
    NormalizeResult,
    Rejected,
    Rejection,
    RejectionCode,
)

# Sections a full-document replace must carry (non-empty)
REQUIRED_DOCUMENT_KEYS = ("meta", "hero", "about")

# Sections without a visibility flag
_ALWAYS_VISIBLE = frozenset({"meta", "nav"})


def _parse_object(raw: str, field: str) -> dict[str, Any] | Rejection:
    try:
        parsed = json.loads(raw or "")
    except json.JSONDecodeError:
        return Rejection(RejectionCode.INVALID_JSON, field, "Invalid JSON")
    if not isinstance(parsed, dict):
        return Rejection(RejectionCode.NOT_AN_OBJECT, field, "JSON must be an object")
    return parsed


def parse_section_json(section_id: str, raw: str, enabled: bool) -> NormalizeResult:
    """
    Parse a verbatim section value.

    The enabled flag from the form overrides whatever the JSON says, except
    for meta and nav which have no visibility toggle.

    Returns:
        Normalized(section) to replace the stored section outright, or Rejected
    """
    if section_id not in EDITABLE_SECTIONS:
        return Rejected(Rejection(RejectionCode.UNKNOWN_SECTION, section_id, "Unknown section"))

    parsed = _parse_object(raw, section_id)
    if isinstance(parsed, Rejection):
        return Rejected(parsed)

    if section_id not in _ALWAYS_VISIBLE:
        parsed["enabled"] = bool(enabled)
    return Normalized(parsed)


def parse_document_json(raw: str) -> NormalizeResult:
    """
    Parse a verbatim full document.

    Only a shallow check is made: meta, hero and about must be present and
    non-empty. Everything else is stored as typed.
    """
    parsed = _parse_object(raw, "site")
    if isinstance(parsed, Rejection):
        return Rejected(parsed)

    missing = [key for key in REQUIRED_DOCUMENT_KEYS if not parsed.get(key)]
    if missing:
        return Rejected(
            Rejection(
                RejectionCode.MISSING_REQUIRED_KEYS,
                ",".join(missing),
                "Site JSON is missing required keys",
            )
        )
    return Normalized(parsed)
