"""
Unit tests for folio.persistence.submission_log module.

Tests capacity eviction, status patches and serialization of concurrent appends.
"""

import asyncio
import json
from pathlib import Path

import pytest

from folio.helpers.dto.submission_dto import SubmissionStatus
from folio.helpers.exceptions import DuplicateSubmissionError, InvalidSubmissionStatusError
from folio.persistence.submission_log import MAX_SUBMISSIONS, SubmissionLog


def make_record(n: int) -> dict:
    return {
        "id": f"id-{n:04d}",
        "createdAt": "2026-01-01T00:00:00.000Z",
        "name": f"Sender {n}",
        "email": f"s{n}@example.com",
        "subject": "Hello",
        "message": "Hi there",
        "status": "received",
    }


class TestAppend:
    """Tests for SubmissionLog.append."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_append_to_missing_file(self, submission_log: SubmissionLog) -> None:
        """The first append creates the log."""
        await submission_log.append(make_record(1))
        assert await submission_log.load() == [make_record(1)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_keeps_only_most_recent_250(self, submission_log: SubmissionLog) -> None:
        """300 sequential appends leave exactly the 250 most recent, oldest first."""
        for n in range(300):
            await submission_log.append(make_record(n))

        records = await submission_log.load()
        assert MAX_SUBMISSIONS == 250
        assert len(records) == 250
        assert [r["id"] for r in records] == [f"id-{n:04d}" for n in range(50, 300)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_concurrent_appends_lose_nothing(self, data_dir: Path) -> None:
        """Appends racing each other are all kept, in enqueue order."""
        log = SubmissionLog(data_dir / "submissions.json", max_records=100)
        await asyncio.gather(*(log.append(make_record(n)) for n in range(40)))

        records = await log.load()
        assert [r["id"] for r in records] == [f"id-{n:04d}" for n in range(40)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_custom_capacity(self, data_dir: Path) -> None:
        """Eviction follows the configured capacity."""
        log = SubmissionLog(data_dir / "submissions.json", max_records=3)
        for n in range(5):
            await log.append(make_record(n))
        assert [r["id"] for r in await log.load()] == ["id-0002", "id-0003", "id-0004"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_duplicate_id_is_refused(self, submission_log: SubmissionLog) -> None:
        """Ids are unique within the log."""
        await submission_log.append(make_record(1))
        with pytest.raises(DuplicateSubmissionError):
            await submission_log.append(make_record(1))
        assert len(await submission_log.load()) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_record_without_id_is_refused(self, submission_log: SubmissionLog) -> None:
        """A record needs a non-empty string id."""
        with pytest.raises(ValueError):
            await submission_log.append({"name": "x"})

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_status_is_refused(self, submission_log: SubmissionLog) -> None:
        """Only lifecycle labels are accepted as status."""
        record = make_record(1) | {"status": "archived"}
        with pytest.raises(InvalidSubmissionStatusError):
            await submission_log.append(record)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_enum_status_is_stored_as_string(self, submission_log: SubmissionLog) -> None:
        """Enum members are stored as their string values."""
        await submission_log.append(make_record(1) | {"status": SubmissionStatus.RECEIVED})
        raw = json.loads(submission_log.path.read_text(encoding="utf-8"))
        assert raw[0]["status"] == "received"

    @pytest.mark.unit
    def test_capacity_must_be_positive(self, data_dir: Path) -> None:
        """A zero capacity is a configuration error."""
        with pytest.raises(ValueError):
            SubmissionLog(data_dir / "submissions.json", max_records=0)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cancelled_append_is_not_lost(self, submission_log: SubmissionLog) -> None:
        """An append whose caller is cancelled while queued is still logged before later appends."""
        gate = asyncio.Event()

        async def blocked() -> None:
            await gate.wait()

        submission_log.queue.enqueue(blocked)
        first = asyncio.create_task(submission_log.append(make_record(1)))
        await asyncio.sleep(0)
        first.cancel()
        with pytest.raises(asyncio.CancelledError):
            await first

        gate.set()
        await submission_log.append(make_record(2))

        assert [r["id"] for r in await submission_log.load()] == ["id-0001", "id-0002"]


class TestPatch:
    """Tests for SubmissionLog.patch."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_patch_changes_only_that_field_of_that_record(self, submission_log: SubmissionLog) -> None:
        """Patching status leaves every other field and record untouched."""
        for n in range(3):
            await submission_log.append(make_record(n))

        assert await submission_log.patch("id-0001", {"status": "sent"}) is True

        records = await submission_log.load()
        assert records[0] == make_record(0)
        assert records[1] == make_record(1) | {"status": "sent"}
        assert records[2] == make_record(2)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_patch_missing_id_is_a_noop(self, submission_log: SubmissionLog) -> None:
        """Patching an unknown id returns False and leaves the log unchanged."""
        await submission_log.append(make_record(0))
        before = submission_log.path.read_text(encoding="utf-8")

        assert await submission_log.patch("evicted", {"status": SubmissionStatus.SEND_FAILED}) is False
        assert submission_log.path.read_text(encoding="utf-8") == before

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_patch_cannot_return_to_received(self, submission_log: SubmissionLog) -> None:
        """Status only moves forward out of received."""
        await submission_log.append(make_record(0))
        with pytest.raises(InvalidSubmissionStatusError):
            await submission_log.patch("id-0000", {"status": "received"})

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_patch_cannot_change_id(self, submission_log: SubmissionLog) -> None:
        """The id is immutable."""
        await submission_log.append(make_record(0))
        with pytest.raises(ValueError):
            await submission_log.patch("id-0000", {"id": "other"})

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_append_and_patch_interleave_safely(self, submission_log: SubmissionLog) -> None:
        """A patch enqueued right after its append sees the appended record."""
        results = await asyncio.gather(
            submission_log.append(make_record(7)),
            submission_log.patch("id-0007", {"status": "email_not_configured"}),
        )
        assert results[1] is True
        assert (await submission_log.get("id-0007"))["status"] == "email_not_configured"


class TestReads:
    """Tests for load, get and recent."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_array_file_reads_as_empty(self, submission_log: SubmissionLog) -> None:
        """A log file holding an object is treated as an empty log."""
        submission_log.path.write_text('{"oops": true}', encoding="utf-8")
        assert await submission_log.load() == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_recent_is_newest_first(self, submission_log: SubmissionLog) -> None:
        """recent returns at most limit records, newest first."""
        for n in range(5):
            await submission_log.append(make_record(n))
        assert [r["id"] for r in await submission_log.recent(3)] == ["id-0004", "id-0003", "id-0002"]
        assert await submission_log.recent(0) == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(self, submission_log: SubmissionLog) -> None:
        """get on an unknown id returns None."""
        assert await submission_log.get("nope") is None
