"""Bounded, append-only submission log.

The log is a JSON array of submission records, oldest first. Appends and
patches run their whole read-modify-write inside the log's write queue, so
concurrent appends never lose entries. When the log grows past its capacity,
the oldest records are dropped from the front.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from folio.helpers.dto.submission_dto import PATCHABLE_STATUSES, SubmissionStatus
from folio.helpers.exceptions import DuplicateSubmissionError, InvalidSubmissionStatusError
from folio.persistence.document_store import DocumentStore
from folio.persistence.write_queue import SerialWriteQueue

logger = logging.getLogger(__name__)

MAX_SUBMISSIONS = 250


class SubmissionLog:
    """
    Append-only log of inbound submissions with per-record status patches.

    Args:
        path: Backing JSON file
        max_records: Capacity; excess records are evicted oldest-first
        queue: Queue to serialize writes on (a new one is created if omitted)
    """

    def __init__(
        self,
        path: str | Path,
        max_records: int = MAX_SUBMISSIONS,
        queue: SerialWriteQueue | None = None,
    ) -> None:
        if max_records < 1:
            raise ValueError(f"max_records must be positive, got {max_records}")
        self.max_records = max_records
        self._store = DocumentStore(path, queue=queue)

    @property
    def path(self) -> Path:
        return self._store.path

    @property
    def queue(self) -> SerialWriteQueue:
        return self._store.queue

    # ----------------------------------------------------------------------
    # Reads (never queued)
    # ----------------------------------------------------------------------

    async def load(self) -> list[dict[str, Any]]:
        """Return all records, oldest first. A missing or non-array file reads as empty."""
        current = await self._store.read(fallback=[])
        if not isinstance(current, list):
            logger.warning(f"[submission_log] {self.path} does not hold an array, treating as empty")
            return []
        return current

    async def get(self, submission_id: str) -> dict[str, Any] | None:
        """Return the record with this id, or None."""
        return _find(await self.load(), submission_id)

    async def recent(self, limit: int = 10) -> list[dict[str, Any]]:
        """Return up to limit records, newest first."""
        records = await self.load()
        if limit <= 0:
            return []
        return list(reversed(records[-limit:]))

    # ----------------------------------------------------------------------
    # Writes (queued read-modify-write)
    # ----------------------------------------------------------------------

    async def append(self, record: Mapping[str, Any]) -> None:
        """
        Append a record, evicting the oldest records beyond capacity.

        Raises:
            ValueError: record has no string id
            InvalidSubmissionStatusError: record carries an unknown status
            DuplicateSubmissionError: a record with the same id is already logged
            DocumentWriteError: the log could not be written
        """
        submission_id = record.get("id")
        if not isinstance(submission_id, str) or not submission_id:
            raise ValueError("Submission record needs a non-empty string id")
        entry = dict(record)
        if "status" in entry:
            entry["status"] = _status_value(entry["status"])
            if entry["status"] not in {s.value for s in SubmissionStatus}:
                raise InvalidSubmissionStatusError(f"Unknown submission status: {entry['status']!r}")

        await self.queue.submit(lambda: self._append_now(entry))

    async def patch(self, submission_id: str, fields: Mapping[str, Any]) -> bool:
        """
        Shallow-merge fields into the record with this id.

        Only lifecycle fields may change: id is immutable and status may only
        move forward out of "received".

        Returns:
            True if a record was patched, False if no record has this id
            (already evicted or never logged). A missing id is not an error.

        Raises:
            ValueError: fields tries to change the id
            InvalidSubmissionStatusError: fields carries a status outside the forward transitions
            DocumentWriteError: the log could not be written
        """
        if "id" in fields:
            raise ValueError("Submission id cannot be patched")
        changes = dict(fields)
        if "status" in changes:
            changes["status"] = _status_value(changes["status"])
            if changes["status"] not in PATCHABLE_STATUSES:
                raise InvalidSubmissionStatusError(
                    f"Cannot move submission {submission_id} to status {changes['status']!r}"
                )

        return await self.queue.submit(lambda: self._patch_now(submission_id, changes))

    async def _append_now(self, entry: dict[str, Any]) -> None:
        records = list(await self.load())
        if _find(records, entry["id"]) is not None:
            raise DuplicateSubmissionError(f"Submission {entry['id']} is already logged")

        records.append(entry)
        evicted = len(records) - self.max_records
        if evicted > 0:
            del records[:evicted]
            logger.info(f"[submission_log] Evicted {evicted} oldest submission(s) (cap {self.max_records})")

        await self._store.write_now(records)
        logger.debug(f"[submission_log] Appended {entry['id']} ({len(records)} records)")

    async def _patch_now(self, submission_id: str, changes: dict[str, Any]) -> bool:
        records = list(await self.load())
        for idx, existing in enumerate(records):
            if isinstance(existing, dict) and existing.get("id") == submission_id:
                records[idx] = {**existing, **changes}
                break
        else:
            logger.info(f"[submission_log] No submission {submission_id} to patch, skipping")
            return False

        await self._store.write_now(records)
        logger.debug(f"[submission_log] Patched {submission_id} with {sorted(changes)}")
        return True


def _status_value(status: Any) -> Any:
    return status.value if isinstance(status, SubmissionStatus) else status


def _find(records: list[Any], submission_id: str) -> dict[str, Any] | None:
    for record in records:
        if isinstance(record, dict) and record.get("id") == submission_id:
            return record
    return None
