"""Section declarations for the site document.

One SectionSpec per editable section, plus the inbound contact submission.
Caps and required fields here are the product rules; the engine that applies
them lives in field_spec_comp.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from folio.components.normalization.field_spec_comp import (
    LONG_TEXT_MAX,
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
from folio.helpers.dto.normalization_dto import (
    NormalizeResult,
    RawFields,
    Rejected,
    Rejection,
    RejectionCode,
)

NAV_LINK_ID_PATTERN = r"[a-z0-9][a-z0-9-]{0,40}"
EMAIL_PATTERN = r"[^\s@]+@[^\s@]+\.[^\s@]+"

# Sections with a visibility checkbox
TOGGLEABLE_SECTIONS = (
    "hero",
    "about",
    "techstack",
    "projects",
    "casestudies",
    "experience",
    "certifications",
    "blog",
    "github",
    "contact",
    "footer",
)


def _number() -> Text:
    return Text("number", max_len=10)


# ----------------------------------------------------------------------
# Cross-field shapes
# ----------------------------------------------------------------------


def _merge_hero_ctas(value: dict[str, Any], raw: RawFields, previous: Mapping[str, Any] | None) -> dict[str, Any]:
    """Fold cta1*/cta2* inputs into the previous CTA buttons; empty inputs keep old values."""
    current = previous.get("ctas") if previous else None
    current = current if isinstance(current, list) else []

    ctas = []
    for slot, style in ((1, "primary"), (2, "outline")):
        existing = current[slot - 1] if len(current) >= slot and isinstance(current[slot - 1], Mapping) else {}
        cta = {"style": style, "icon": "", **existing}
        label = value.pop(f"cta{slot}Label")
        href = value.pop(f"cta{slot}Href")
        if label:
            cta["label"] = label
        if href:
            cta["href"] = href
        if cta.get("label") or cta.get("href"):
            ctas.append(cta)

    value["ctas"] = ctas
    return value


def _project_link(card: dict[str, Any], raw: Mapping[str, Any]) -> dict[str, Any]:
    link_type = card.pop("linkType") or "link"
    label = card.pop("linkLabel")
    href = card.pop("linkHref")
    icon = card.pop("linkIcon")
    if label or href or icon:
        if link_type == "status":
            card["link"] = {"type": "status", "icon": icon, "label": label}
        else:
            card["link"] = {"href": href, "icon": icon, "label": label}
    return card


def _certification_extras(card: dict[str, Any], raw: Mapping[str, Any]) -> dict[str, Any]:
    meta = [pair for pair in (card.pop("meta1"), card.pop("meta2")) if pair]
    ribbon_text = card.pop("ribbonText")
    ribbon_variant = card.pop("ribbonVariant")
    card["meta"] = meta
    if ribbon_text:
        card["ribbon"] = {"text": ribbon_text, "variant": ribbon_variant}
    return card


def _pinned_lang(repo: dict[str, Any], raw: Mapping[str, Any]) -> dict[str, Any]:
    stars = repo.pop("stars")
    repo["lang"] = {"name": repo.pop("langName"), "class": repo.pop("langClass")}
    repo["stars"] = stars
    return repo


# ----------------------------------------------------------------------
# Declarations
# ----------------------------------------------------------------------

SECTION_SPECS: dict[str, SectionSpec] = {
    spec.name: spec
    for spec in (
        SectionSpec(
            "meta",
            (
                Text("title", max_len=120, required=True),
                Text("description", max_len=240),
                Text("ogImage", max_len=300, label="OG image URL"),
            ),
        ),
        SectionSpec(
            "nav",
            (
                Text("logoText", max_len=80, required=True),
                Group(
                    "links",
                    (
                        Text("id", required=True, pattern=NAV_LINK_ID_PATTERN, ignore_case=True),
                        Text("label", required=True),
                    ),
                    max_items=20,
                ),
            ),
        ),
        SectionSpec(
            "hero",
            (
                Enabled(),
                Text("greeting", max_len=80),
                Text("firstName", max_len=40, required=True),
                Text("lastName", max_len=40, required=True),
                Text("description", max_len=320),
                Text("scrollText", max_len=40),
                LineList("titles", 12),
                Text("cta1Label", max_len=40, label="CTA text"),
                Text("cta1Href", max_len=240, label="CTA URL"),
                Text("cta2Label", max_len=40, label="CTA text"),
                Text("cta2Href", max_len=240, label="CTA URL"),
            ),
            finalize=_merge_hero_ctas,
        ),
        SectionSpec(
            "about",
            (
                Enabled(),
                _number(),
                Text("title", max_len=40, required=True),
                Paragraphs("paragraphsHtml", 10, source="paragraphs"),
                Group("info", (Text("label", required=True), Text("value", required=True)), max_items=20),
                Nested(
                    "resume",
                    (
                        Text("label", max_len=60, label="Resume label"),
                        Text("href", max_len=240, label="Resume URL"),
                        Text("icon", max_len=80, label="Resume icon"),
                    ),
                ),
                Group(
                    "stats",
                    (Text("icon"), Number("count"), Text("suffix"), Text("label", required=True)),
                    max_items=12,
                ),
            ),
        ),
        SectionSpec(
            "techstack",
            (
                Enabled(),
                _number(),
                Text("title", max_len=40, required=True),
                LineList("sphereTags", 80),
                Group(
                    "categories",
                    (Text("icon"), Text("title", required=True), PipeLines("items", 60, source="itemsLines")),
                    max_items=12,
                ),
            ),
        ),
        SectionSpec(
            "projects",
            (
                Enabled(),
                _number(),
                Text("title", max_len=60, required=True),
                PipeLines("filters", 30, source="filtersLines", keys=("label", "value"), require_both=True),
                Group(
                    "cards",
                    (
                        Text("category"),
                        Text("frontIcon"),
                        Text("frontTitle", required=True),
                        Text("frontDesc", max_len=LONG_TEXT_MAX),
                        Text("backTitle"),
                        Text("backDesc", max_len=LONG_TEXT_MAX),
                        CommaList("tech", 20, source="techCsv"),
                        Text("linkType"),
                        Text("linkLabel"),
                        Text("linkHref"),
                        Text("linkIcon"),
                    ),
                    max_items=40,
                    finalize=_project_link,
                ),
            ),
        ),
        SectionSpec(
            "casestudies",
            (
                Enabled(),
                _number(),
                Text("title", max_len=60, required=True),
                Text("subtitle", max_len=120),
                Group(
                    "cards",
                    (
                        Text("icon"),
                        Text("tag"),
                        Text("title", required=True),
                        Text("challenge", max_len=LONG_TEXT_MAX),
                        CommaList("architecture", 30, source="architectureCsv"),
                        LineList("impact", 20, source="impactLines"),
                        CommaList("tech", 30, source="techCsv"),
                    ),
                    max_items=20,
                ),
            ),
        ),
        SectionSpec(
            "experience",
            (
                Enabled(),
                _number(),
                Text("title", max_len=60, required=True),
                Group(
                    "items",
                    (
                        Text("role", required=True),
                        Text("company", required=True),
                        Text("date"),
                        Text("location"),
                        LineList("details", 40, source="detailsLines"),
                        CommaList("tags", 30, source="tagsCsv"),
                    ),
                    max_items=30,
                ),
            ),
        ),
        SectionSpec(
            "certifications",
            (
                Enabled(),
                _number(),
                Text("title", max_len=60, required=True),
                Group(
                    "cards",
                    (
                        Text("icon"),
                        Text("title", required=True),
                        Text("desc", max_len=LONG_TEXT_MAX),
                        IconTextPair("meta1"),
                        IconTextPair("meta2"),
                        Text("ribbonText"),
                        Text("ribbonVariant"),
                    ),
                    max_items=30,
                    finalize=_certification_extras,
                ),
            ),
        ),
        SectionSpec(
            "blog",
            (
                Enabled(),
                _number(),
                Text("title", max_len=60, required=True),
                Text("subtitle", max_len=160),
                Group(
                    "posts",
                    (
                        Text("icon"),
                        Text("category"),
                        Text("date"),
                        Text("title", required=True),
                        Text("excerpt", max_len=LONG_TEXT_MAX),
                        Text("href"),
                    ),
                    max_items=30,
                ),
            ),
        ),
        SectionSpec(
            "github",
            (
                Enabled(),
                _number(),
                Text("title", max_len=60, required=True),
                Text("username", max_len=40),
                Text("tagline", max_len=120),
                Text("profileUrl", max_len=240, label="Profile URL"),
                Group(
                    "stats",
                    (Text("icon"), Text("value"), Text("label", required=True)),
                    max_items=10,
                ),
                Group(
                    "pinned",
                    (
                        Text("href"),
                        Text("icon"),
                        Text("name", required=True),
                        Text("desc", max_len=LONG_TEXT_MAX),
                        Text("stars"),
                        Text("langName"),
                        Text("langClass"),
                    ),
                    max_items=12,
                    finalize=_pinned_lang,
                ),
            ),
        ),
        SectionSpec(
            "contact",
            (
                Enabled(),
                _number(),
                Text("title", max_len=60, required=True),
                Text("description", max_len=500),
                Group(
                    "details",
                    (Text("icon"), Text("label", required=True), Text("value", required=True), Text("href")),
                    max_items=12,
                ),
                Group(
                    "socials",
                    (Text("href", required=True), Text("label", required=True), Text("icon")),
                    max_items=12,
                ),
                Nested(
                    "form",
                    (
                        Text("nameLabel"),
                        Text("emailLabel"),
                        Text("subjectLabel"),
                        Text("messageLabel"),
                        Text("buttonLabel"),
                    ),
                ),
            ),
        ),
        SectionSpec(
            "footer",
            (
                Enabled(),
                Text("logoText", max_len=80, required=True),
                Text("line1", max_len=120, label="Line"),
                Group(
                    "links",
                    (Text("href", required=True), Text("icon"), Text("label", required=True)),
                    max_items=12,
                ),
            ),
        ),
    )
}

EDITABLE_SECTIONS = frozenset(SECTION_SPECS)

SUBMISSION_SPEC = SectionSpec(
    "submission",
    (
        Text("name", max_len=80, required=True),
        Text("email", max_len=160, required=True, pattern=EMAIL_PATTERN),
        Text("subject", max_len=140, required=True),
        Text("message", max_len=4000, required=True),
    ),
)


def normalize_section(
    section_id: str,
    raw: RawFields | None,
    previous: Mapping[str, Any] | None = None,
) -> NormalizeResult:
    """
    Normalize raw form fields for one section.

    Args:
        section_id: Document key of the section (e.g. "hero")
        raw: Raw field set as submitted
        previous: Current section value, used by sections whose shape
            depends on it (hero CTAs); never mutated

    Returns:
        Normalized(value) ready to merge over previous, or Rejected(reason)
    """
    spec = SECTION_SPECS.get(section_id)
    if spec is None:
        return Rejected(Rejection(RejectionCode.UNKNOWN_SECTION, section_id, "Unknown section"))
    return spec.normalize(raw, previous)


def normalize_submission(raw: RawFields | None) -> NormalizeResult:
    """Normalize an inbound contact submission (name, email, subject, message)."""
    return SUBMISSION_SPEC.normalize(raw)
