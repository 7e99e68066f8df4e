"""
ContentService - Site document reads and edits.

Owns the DocumentStore for the site document and delegates the edit paths to
the content workflows. The submission log is only read, for dashboard counts.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from folio.components.content.section_merge_comp import summarize_document
from folio.workflows.content.update_section_wf import replace_document_wf, replace_section_wf, update_section_wf

if TYPE_CHECKING:
    from folio.helpers.dto.content_dto import DocumentSummary
    from folio.helpers.dto.normalization_dto import NormalizeResult, RawFields
    from folio.persistence.document_store import DocumentStore
    from folio.persistence.submission_log import SubmissionLog

logger = logging.getLogger(__name__)


class ContentService:
    """
    Service for reading and editing the site document.

    Args:
        store: Store owning the site document
        submissions: Submission log, used for summary counts
    """

    def __init__(self, store: DocumentStore, submissions: SubmissionLog) -> None:
        self.store = store
        self.submissions = submissions

    async def get_document(self) -> dict[str, Any] | None:
        """Return the site document, or None when it is missing or not an object."""
        document = await self.store.read(fallback=None)
        return document if isinstance(document, dict) else None

    async def get_section(self, section_id: str) -> Any:
        """Return one section value, or None when absent."""
        document = await self.get_document()
        return document.get(section_id) if document else None

    async def update_section(self, section_id: str, raw: RawFields) -> NormalizeResult:
        """Normalize raw form fields and merge them into a section."""
        return await update_section_wf(store=self.store, section_id=section_id, raw=raw)

    async def replace_section(self, section_id: str, raw_json: str, enabled: bool = True) -> NormalizeResult:
        """Replace a section with verbatim JSON."""
        return await replace_section_wf(store=self.store, section_id=section_id, raw_json=raw_json, enabled=enabled)

    async def replace_document(self, raw_json: str) -> NormalizeResult:
        """Replace the whole site document with verbatim JSON."""
        return await replace_document_wf(store=self.store, raw_json=raw_json)

    async def summarize(self) -> DocumentSummary | None:
        """Dashboard counts, or None when there is no document yet."""
        document = await self.get_document()
        if document is None:
            return None
        records = await self.submissions.load()
        return summarize_document(document, len(records))
