"""Normalization package: raw form input -> validated section values."""

from folio.components.normalization.field_spec_comp import (
    LONG_TEXT_MAX,
    SHORT_TEXT_MAX,
    CommaList,
    Enabled,
    Group,
    IconTextPair,
    LineList,
    Nested,
    Number,
    Paragraphs,
    PipeLines,
    SectionSpec,
    Text,
)
from folio.components.normalization.grammar_comp import (
    parse_enabled,
    parse_icon_text_pair,
    parse_number,
    parse_pipe_line,
    parse_pipe_lines,
    split_csv,
    split_lines,
    split_paragraphs,
)
from folio.components.normalization.section_specs_comp import (
    EDITABLE_SECTIONS,
    SECTION_SPECS,
    TOGGLEABLE_SECTIONS,
    normalize_section,
    normalize_submission,
)
from folio.components.normalization.verbatim_comp import (
    REQUIRED_DOCUMENT_KEYS,
    parse_document_json,
    parse_section_json,
)

__all__ = [
    "EDITABLE_SECTIONS",
    "LONG_TEXT_MAX",
    "REQUIRED_DOCUMENT_KEYS",
    "SECTION_SPECS",
    "SHORT_TEXT_MAX",
    "TOGGLEABLE_SECTIONS",
    "CommaList",
    "Enabled",
    "Group",
    "IconTextPair",
    "LineList",
    "Nested",
    "Number",
    "Paragraphs",
    "PipeLines",
    "SectionSpec",
    "Text",
    "normalize_section",
    "normalize_submission",
    "parse_document_json",
    "parse_enabled",
    "parse_icon_text_pair",
    "parse_number",
    "parse_pipe_line",
    "parse_pipe_lines",
    "parse_section_json",
    "split_csv",
    "split_lines",
    "split_paragraphs",
]
