"""Normalization DTOs - raw input shapes and the accept/reject result of the engine.

This module defines:
- RawValue / RawFields: what a form layer hands to the engine
- RejectionCode: the finite set of reasons an input is refused
- Rejection: one specific refusal (code, field path, message, limit)
- Normalized / Rejected: the two arms of NormalizeResult

Usage:
    result = normalize_section("hero", raw_fields, previous=site.get("hero"))
    if isinstance(result, Rejected):
        return redirect_with_error(result.reason.message)
    site["hero"] = merge_section(site.get("hero"), result.value)

Rules:
- Import only stdlib and typing (no folio.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

# A raw field value: a string, a repeated string (checkbox pairs), a nested
# field set, or a list of field sets (repeated form groups). None means absent.
RawValue = str | list[Any] | Mapping[str, Any] | None
RawFields = Mapping[str, RawValue]


class RejectionCode(str, Enum):
    """Why an input was refused."""

    MISSING_REQUIRED = "missing_required"
    TOO_LONG = "too_long"
    MALFORMED = "malformed"
    INVALID_JSON = "invalid_json"
    NOT_AN_OBJECT = "not_an_object"
    MISSING_REQUIRED_KEYS = "missing_required_keys"
    UNKNOWN_SECTION = "unknown_section"


@dataclass(frozen=True)
class Rejection:
    """A single, specific validation failure."""

    code: RejectionCode
    field: str  # dotted/indexed path, e.g. "title" or "cards[2].frontTitle"
    message: str  # user-facing text, e.g. "Title too long"
    limit: int | None = None  # the violated cap for TOO_LONG


@dataclass(frozen=True)
class Normalized:
    """Engine accepted the input; value is ready to merge."""

    value: dict[str, Any]
    ok: Literal[True] = True


@dataclass(frozen=True)
class Rejected:
    """Engine refused the input; nothing may be written."""

    reason: Rejection
    ok: Literal[False] = False


NormalizeResult = Normalized | Rejected
