"""Micro-grammars for loosely-structured form input.

Each function turns one raw field value into a clean Python value:
- as_trimmed_string: "  x  " -> "x" (None -> "")
- as_group_list: one group or a list of groups -> list of groups
- parse_enabled: checkbox value(s) -> bool
- parse_number: "12" -> 12, garbage -> 0
- split_lines: "a\\n\\nb \\n c" -> ["a", "b", "c"]
- split_paragraphs: "p1\\n\\n\\np2" -> ["p1", "p2"]
- split_csv: "a, b,,c" -> ["a", "b", "c"]
- parse_pipe_line: "fa-star | Gold Tier" -> {"icon": "fa-star", "label": "Gold Tier"}
- parse_pipe_lines: many pipe lines, capped
- parse_icon_text_pair: "fa-clock | 2024" -> {"icon": "fa-clock", "text": "2024"}

All functions are pure: no I/O, no validation errors. Length and
required-field rules live in field_spec_comp.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def as_trimmed_string(value: Any) -> str:
    """
    Coerce a raw scalar to a trimmed string.

    Strings are trimmed, numbers are rendered (YAML/JSON inputs carry them),
    anything else (None, booleans, lists, mappings) counts as absent.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def as_group_list(value: Any) -> list[Any]:
    """
    Normalize a repeated-group value to a list.

    Form parsers hand over a single group as a mapping, many groups as a list,
    and sparse indexed groups as a mapping keyed "0", "1", ... ; all three
    become a list in index order.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, Mapping) and value and all(isinstance(k, str) and k.isdigit() for k in value):
        return [value[k] for k in sorted(value, key=int)]
    return [value]


def parse_enabled(value: Any) -> bool:
    """A section is enabled iff its checkbox value (or one of its values) is "1"."""
    values = value if isinstance(value, list) else [value]
    return any(v is True or as_trimmed_string(v) == "1" for v in values)


def parse_number(value: Any) -> int | float:
    """Parse a count; empty, unparseable or non-finite input becomes 0."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    else:
        raw = as_trimmed_string(value)
        if not raw:
            return 0
        try:
            number = float(raw)
        except ValueError:
            return 0
    if not math.isfinite(number):
        return 0
    return int(number) if number.is_integer() else number


def _cap(items: list[Any], max_items: int | None) -> list[Any]:
    return items if max_items is None else items[:max_items]


def split_lines(value: Any, max_items: int | None = None) -> list[str]:
    """Split on newlines, trim each line, drop empty lines, keep at most max_items."""
    raw = as_trimmed_string(value)
    if not raw:
        return []
    lines = [line.strip() for line in raw.split("\n")]
    return _cap([line for line in lines if line], max_items)


def split_paragraphs(value: Any, max_items: int | None = None) -> list[str]:
    """Split on blank lines (one or more), trim each paragraph, keep at most max_items."""
    raw = as_trimmed_string(value)
    if not raw:
        return []
    parts = [p.strip() for p in _PARAGRAPH_BREAK.split(raw)]
    return _cap([p for p in parts if p], max_items)


def split_csv(value: Any, max_items: int | None = None) -> list[str]:
    """Split on commas, trim each entry, drop empty entries, keep at most max_items."""
    raw = as_trimmed_string(value)
    if not raw:
        return []
    parts = [p.strip() for p in raw.split(",")]
    return _cap([p for p in parts if p], max_items)


def parse_pipe_line(line: str, keys: tuple[str, str] = ("icon", "label")) -> dict[str, str] | None:
    """
    Split one line on "|" into a head token and a remainder.

    The remainder keeps any further pipes (re-joined as " | "). A line with
    neither head nor remainder yields None.

    Example:
        >>> parse_pipe_line("fa-star | Gold Tier")
        {'icon': 'fa-star', 'label': 'Gold Tier'}
        >>> parse_pipe_line("justtext")
        {'icon': 'justtext', 'label': ''}
    """
    parts = [p.strip() for p in line.split("|")]
    head = parts[0]
    rest = " | ".join(parts[1:]).strip()
    if not head and not rest:
        return None
    return {keys[0]: head, keys[1]: rest}


def parse_pipe_lines(
    value: Any,
    max_items: int | None = None,
    keys: tuple[str, str] = ("icon", "label"),
    require_both: bool = False,
) -> list[dict[str, str]]:
    """
    Parse a block of pipe lines (icon/label, label/value, ...).

    Lines are capped first, then lines that yield nothing (or, with
    require_both, lack either part) are dropped.
    """
    parsed = []
    for line in split_lines(value, max_items):
        pair = parse_pipe_line(line, keys)
        if pair is None:
            continue
        if require_both and not (pair[keys[0]] and pair[keys[1]]):
            continue
        parsed.append(pair)
    return parsed


def parse_icon_text_pair(value: Any) -> dict[str, str] | None:
    """Parse a single "icon | text" value; None when both parts are empty."""
    raw = as_trimmed_string(value)
    if not raw:
        return None
    return parse_pipe_line(raw, ("icon", "text"))
