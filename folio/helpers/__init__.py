"""
Helpers package.
"""

from .exceptions import (
    DocumentWriteError,
    DuplicateSubmissionError,
    FolioError,
    InvalidSubmissionStatusError,
    MissingDocumentError,
)
from .logging_helper import configure_logging, sanitize_exception_message
from .time_helper import now_iso

__all__ = [
    "DocumentWriteError",
    "DuplicateSubmissionError",
    "FolioError",
    "InvalidSubmissionStatusError",
    "MissingDocumentError",
    "configure_logging",
    "now_iso",
    "sanitize_exception_message",
]
