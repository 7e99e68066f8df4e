"""Apply edits to the site document.

Three write paths, all ending in one queued whole-document write:
- update_section_wf: normalize raw form fields, shallow-merge over the section
- replace_section_wf: verbatim section JSON, replaces the section outright
- replace_document_wf: verbatim document JSON, replaces the whole file

The document is read outside the write queue and written inside it, so two
editors saving different sections at the same moment race: the later write
wins and the earlier edit is lost. Rejected input never reaches the store.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from folio.components.content.section_merge_comp import apply_section, merge_section
from folio.components.normalization.section_specs_comp import normalize_section
from folio.components.normalization.verbatim_comp import parse_document_json, parse_section_json
from folio.helpers.dto.normalization_dto import Normalized, NormalizeResult, RawFields, Rejected
from folio.helpers.exceptions import MissingDocumentError

if TYPE_CHECKING:
    from folio.persistence.document_store import DocumentStore

logger = logging.getLogger(__name__)


async def _load_document(store: DocumentStore) -> dict[str, Any]:
    document = await store.read(fallback=None)
    if not isinstance(document, dict):
        raise MissingDocumentError(f"Missing {store.path.name}")
    return document


async def update_section_wf(
    *,
    store: DocumentStore,
    section_id: str,
    raw: RawFields,
) -> NormalizeResult:
    """
    Normalize raw fields for one section and merge them into the document.

    Args:
        store: Store owning the site document
        section_id: Section to update (e.g. "projects")
        raw: Raw field set from the editing form

    Returns:
        Normalized(merged section) after the write settled, or the Rejected
        result untouched (nothing written)

    Raises:
        MissingDocumentError: the document does not exist or is not an object
        DocumentWriteError: the write failed
    """
    document = await _load_document(store)
    previous = document.get(section_id)

    result = normalize_section(section_id, raw, previous=previous)
    if isinstance(result, Rejected):
        return result

    merged = merge_section(previous, result.value)
    await store.write(apply_section(document, section_id, merged))
    logger.info(f"[content] Updated section {section_id}")
    return Normalized(merged)


async def replace_section_wf(
    *,
    store: DocumentStore,
    section_id: str,
    raw_json: str,
    enabled: bool,
) -> NormalizeResult:
    """
    Replace one section with verbatim JSON.

    Raises:
        MissingDocumentError: the document does not exist or is not an object
        DocumentWriteError: the write failed
    """
    result = parse_section_json(section_id, raw_json, enabled)
    if isinstance(result, Rejected):
        return result

    document = await _load_document(store)
    await store.write(apply_section(document, section_id, result.value))
    logger.info(f"[content] Replaced section {section_id} verbatim")
    return result


async def replace_document_wf(*, store: DocumentStore, raw_json: str) -> NormalizeResult:
    """Replace the whole document with verbatim JSON. Works even when no document exists yet."""
    result = parse_document_json(raw_json)
    if isinstance(result, Rejected):
        return result

    await store.write(result.value)
    logger.info(f"[content] Replaced site document ({len(result.value)} sections)")
    return result
