"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.

Validation failures are NOT exceptions: the normalization engine returns a
Rejected value instead (see helpers/dto/normalization_dto.py).
"""

from __future__ import annotations


class FolioError(Exception):
    """Base class for errors raised by the storage core."""


class DocumentWriteError(FolioError):
    """Raised when a JSON file could not be written and atomically replaced."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason


class MissingDocumentError(FolioError):
    """Raised when a section update targets a site document that does not exist."""


class DuplicateSubmissionError(FolioError):
    """Raised when appending a submission whose id is already in the log."""


class InvalidSubmissionStatusError(FolioError):
    """Raised when a patch would move a submission to an unknown or earlier status."""
