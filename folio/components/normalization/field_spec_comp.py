"""Declarative field engine for section normalization.

A section is declared as a SectionSpec: an ordered tuple of field kinds.
Each field kind reads one raw value (by its source key), applies the shared
micro-grammars from grammar_comp, enforces its caps, and produces one output
key. The engine evaluates the declaration and returns either Normalized(value)
or Rejected(reason). It never performs I/O.

Field kinds:
- Text: trimmed string with a length cap, optional required flag and pattern
- Enabled: checkbox flag
- Number: numeric count (garbage -> 0)
- LineList / Paragraphs / CommaList: capped string lists
- PipeLines: capped "head | rest" line records
- IconTextPair: a single "icon | text" record (or None)
- Nested: a nested raw field set normalized by its own fields
- Group: a repeated field set; malformed groups are dropped, not rejected

Rules inside a Group differ from the top level: a group whose required field
is missing (or does not match its pattern) is silently dropped, so half-filled
template rows never block a save. A too-long value in a kept group still
rejects the whole input.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from folio.components.normalization.grammar_comp import (
    as_group_list,
    as_trimmed_string,
    parse_enabled,
    parse_icon_text_pair,
    parse_number,
    parse_pipe_lines,
    split_csv,
    split_lines,
    split_paragraphs,
)
from folio.helpers.dto.normalization_dto import (
    Normalized,
    NormalizeResult,
    RawFields,
    Rejected,
    Rejection,
    RejectionCode,
)

logger = logging.getLogger(__name__)

# Default caps for free text when a declaration does not set one
SHORT_TEXT_MAX = 240
LONG_TEXT_MAX = 2000

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class FieldRejectedError(Exception):
    """Internal signal carrying a Rejection out of nested field evaluation."""

    def __init__(self, rejection: Rejection) -> None:
        super().__init__(rejection.message)
        self.rejection = rejection


def humanize(key: str) -> str:
    """Turn a field key into a message label: "firstName" -> "First name"."""
    words = _CAMEL_BOUNDARY.sub(" ", key).replace("_", " ").split()
    if not words:
        return key
    text = " ".join(w.lower() for w in words)
    return text[0].upper() + text[1:]


def _source_value(raw: Mapping[str, Any], key: str, source: str | None) -> Any:
    return raw.get(source or key)


# ----------------------------------------------------------------------
# Field kinds
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class Text:
    """Trimmed free text with a length cap."""

    key: str
    max_len: int = SHORT_TEXT_MAX
    required: bool = False
    source: str | None = None
    label: str | None = None
    pattern: str | None = None
    ignore_case: bool = False

    @cached_property
    def _regex(self) -> re.Pattern[str] | None:
        if self.pattern is None:
            return None
        return re.compile(self.pattern, re.IGNORECASE if self.ignore_case else 0)

    def extract(self, raw: Mapping[str, Any], path: str) -> str:
        value = as_trimmed_string(_source_value(raw, self.key, self.source))
        label = self.label or humanize(self.key)
        where = f"{path}{self.key}"

        if not value:
            if self.required:
                raise FieldRejectedError(Rejection(RejectionCode.MISSING_REQUIRED, where, f"{label} is required"))
            return value
        # Pattern first: an identifier too long for its pattern is malformed, not too long
        if self._regex is not None and not self._regex.fullmatch(value):
            raise FieldRejectedError(Rejection(RejectionCode.MALFORMED, where, f"{label} is invalid"))
        if len(value) > self.max_len:
            raise FieldRejectedError(Rejection(RejectionCode.TOO_LONG, where, f"{label} too long", self.max_len))
        return value


@dataclass(frozen=True)
class Enabled:
    """Section visibility checkbox."""

    key: str = "enabled"
    source: str | None = None

    def extract(self, raw: Mapping[str, Any], path: str) -> bool:
        return parse_enabled(_source_value(raw, self.key, self.source))


@dataclass(frozen=True)
class Number:
    """Numeric value; empty or unparseable input becomes 0."""

    key: str
    source: str | None = None

    def extract(self, raw: Mapping[str, Any], path: str) -> int | float:
        return parse_number(_source_value(raw, self.key, self.source))


@dataclass(frozen=True)
class LineList:
    """One entry per non-empty line."""

    key: str
    max_items: int
    source: str | None = None

    def extract(self, raw: Mapping[str, Any], path: str) -> list[str]:
        return split_lines(_source_value(raw, self.key, self.source), self.max_items)


@dataclass(frozen=True)
class Paragraphs:
    """One entry per blank-line separated paragraph."""

    key: str
    max_items: int
    source: str | None = None

    def extract(self, raw: Mapping[str, Any], path: str) -> list[str]:
        return split_paragraphs(_source_value(raw, self.key, self.source), self.max_items)


@dataclass(frozen=True)
class CommaList:
    """One entry per non-empty comma separated value."""

    key: str
    max_items: int
    source: str | None = None

    def extract(self, raw: Mapping[str, Any], path: str) -> list[str]:
        return split_csv(_source_value(raw, self.key, self.source), self.max_items)


@dataclass(frozen=True)
class PipeLines:
    """Lines of "head | rest", e.g. "fa-python | Python" or "All | all"."""

    key: str
    max_items: int
    source: str | None = None
    keys: tuple[str, str] = ("icon", "label")
    require_both: bool = False

    def extract(self, raw: Mapping[str, Any], path: str) -> list[dict[str, str]]:
        return parse_pipe_lines(
            _source_value(raw, self.key, self.source),
            self.max_items,
            keys=self.keys,
            require_both=self.require_both,
        )


@dataclass(frozen=True)
class IconTextPair:
    """A single "icon | text" value, or None when empty."""

    key: str
    source: str | None = None

    def extract(self, raw: Mapping[str, Any], path: str) -> dict[str, str] | None:
        return parse_icon_text_pair(_source_value(raw, self.key, self.source))


@dataclass(frozen=True)
class Nested:
    """A nested raw field set (e.g. about.resume). Non-mapping input counts as empty."""

    key: str
    fields: tuple[Any, ...] = ()
    source: str | None = None

    def extract(self, raw: Mapping[str, Any], path: str) -> dict[str, Any]:
        nested = _source_value(raw, self.key, self.source)
        if not isinstance(nested, Mapping):
            nested = {}
        return evaluate_fields(self.fields, nested, f"{path}{self.key}.")


@dataclass(frozen=True)
class Group:
    """
    Repeated field sets (cards, links, items, ...).

    Each raw group is evaluated on its own. Groups missing a required field,
    or whose patterned field does not match, are dropped. The surviving
    groups are capped at max_items. finalize(item, raw_group) may reshape a
    kept item (e.g. fold linkLabel/linkHref into a link object).
    """

    key: str
    fields: tuple[Any, ...] = ()
    max_items: int = 20
    source: str | None = None
    finalize: Callable[[dict[str, Any], Mapping[str, Any]], dict[str, Any]] | None = None

    @cached_property
    def _evaluation_order(self) -> tuple[Any, ...]:
        # Identity fields first so a half-filled row is dropped before any cap check
        return tuple(sorted(self.fields, key=lambda f: not getattr(f, "required", False)))

    def extract(self, raw: Mapping[str, Any], path: str) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        for index, group in enumerate(as_group_list(_source_value(raw, self.key, self.source))):
            item = self._extract_one(group, f"{path}{self.key}[{index}].")
            if item is None:
                logger.debug(f"[normalize] Dropped incomplete group {path}{self.key}[{index}]")
                continue
            items.append(item)
            if len(items) >= self.max_items:
                break
        return items

    def _extract_one(self, group: Any, path: str) -> dict[str, Any] | None:
        if not isinstance(group, Mapping):
            return None
        values: dict[str, Any] = {}
        for field in self._evaluation_order:
            try:
                values[field.key] = field.extract(group, path)
            except FieldRejectedError as e:
                if e.rejection.code in (RejectionCode.MISSING_REQUIRED, RejectionCode.MALFORMED):
                    return None
                raise
        item = {field.key: values[field.key] for field in self.fields}
        if self.finalize is not None:
            item = self.finalize(item, group)
        return item


# ----------------------------------------------------------------------
# Engine
# ----------------------------------------------------------------------


def evaluate_fields(fields: tuple[Any, ...], raw: Mapping[str, Any], path: str = "") -> dict[str, Any]:
    """
    Evaluate fields in declaration order.

    Raises:
        FieldRejectedError: first field that fails validation
    """
    return {field.key: field.extract(raw, path) for field in fields}


@dataclass(frozen=True)
class SectionSpec:
    """
    Declaration of one normalizable section.

    Args:
        name: Section id (document key)
        fields: Field kinds, evaluated in order
        finalize: Optional hook(value, raw, previous) -> value for cross-field
            shapes that depend on the previous section value (e.g. hero CTAs)
    """

    name: str
    fields: tuple[Any, ...]
    finalize: Callable[[dict[str, Any], RawFields, Mapping[str, Any] | None], dict[str, Any]] | None = None

    def normalize(self, raw: RawFields | None, previous: Mapping[str, Any] | None = None) -> NormalizeResult:
        """Validate raw input against this declaration."""
        raw_fields: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
        try:
            value = evaluate_fields(self.fields, raw_fields)
        except FieldRejectedError as e:
            logger.info(f"[normalize] {self.name} rejected: {e.rejection.code.value} at {e.rejection.field}")
            return Rejected(e.rejection)
        if self.finalize is not None:
            value = self.finalize(value, raw_fields, previous if isinstance(previous, Mapping) else None)
        return Normalized(value)
