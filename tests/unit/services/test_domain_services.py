"""
Unit tests for ContentService and SubmissionService.
"""

from pathlib import Path

import pytest

from folio.helpers.dto.normalization_dto import Normalized
from folio.helpers.dto.submission_dto import SubmissionStatus
from folio.helpers.exceptions import InvalidSubmissionStatusError
from folio.persistence.document_store import DocumentStore
from folio.persistence.submission_log import SubmissionLog
from folio.services.domain.content_svc import ContentService
from folio.services.domain.submissions_svc import SubmissionService

VALID = {"name": "Ada", "email": "ada@example.com", "subject": "Hello", "message": "Let's talk."}


class TestSubmissionService:
    """Tests for the submission lifecycle."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_record_then_mark_sent(self, submission_log: SubmissionLog) -> None:
        """received moves to sent through mark_status."""
        service = SubmissionService(submission_log)
        result = await service.record_contact(VALID)
        assert isinstance(result, Normalized)
        submission_id = result.value["id"]

        assert await service.mark_status(submission_id, SubmissionStatus.SENT) is True
        record = await service.get(submission_id)
        assert record is not None
        assert record["status"] == "sent"
        assert await service.count() == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_mark_unknown_returns_false(self, submission_log: SubmissionLog) -> None:
        """Marking an evicted submission is not an error."""
        assert await SubmissionService(submission_log).mark_status("gone", "send_failed") is False

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_mark_received_is_refused(self, submission_log: SubmissionLog) -> None:
        """Status never moves back to received."""
        service = SubmissionService(submission_log)
        result = await service.record_contact(VALID)
        with pytest.raises(InvalidSubmissionStatusError):
            await service.mark_status(result.value["id"], "received")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_recent_newest_first(self, submission_log: SubmissionLog) -> None:
        """recent lists newest first."""
        service = SubmissionService(submission_log)
        first = await service.record_contact(VALID | {"subject": "first"})
        second = await service.record_contact(VALID | {"subject": "second"})
        recent = await service.recent(5)
        assert [r["id"] for r in recent] == [second.value["id"], first.value["id"]]


class TestContentService:
    """Tests for ContentService reads and summary."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_summary_counts_submissions(self, site_store: DocumentStore, submission_log: SubmissionLog) -> None:
        """The summary includes the submission log length."""
        await SubmissionService(submission_log).record_contact(VALID)
        summary = await ContentService(site_store, submission_log).summarize()
        assert summary is not None
        assert summary.submissions == 1
        assert summary.nav_links == 2

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_no_document(self, data_dir: Path, submission_log: SubmissionLog) -> None:
        """Without a document there is nothing to show or summarize."""
        service = ContentService(DocumentStore(data_dir / "site.json"), submission_log)
        assert await service.get_document() is None
        assert await service.get_section("hero") is None
        assert await service.summarize() is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_update_then_get_section(self, site_store: DocumentStore, submission_log: SubmissionLog) -> None:
        """An accepted update is visible on the next read."""
        service = ContentService(site_store, submission_log)
        await service.update_section("footer", {"enabled": "1", "logoText": "AL", "line1": "Made by hand"})
        footer = await service.get_section("footer")
        assert footer == {"enabled": True, "logoText": "AL", "line1": "Made by hand", "links": []}
