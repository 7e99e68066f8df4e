"""
Persistence package.
"""

from .document_store import DocumentStore
from .json_file import dump_json, ensure_dir, load_json, save_json_atomic
from .submission_log import MAX_SUBMISSIONS, SubmissionLog
from .write_queue import SerialWriteQueue

__all__ = [
    "MAX_SUBMISSIONS",
    "DocumentStore",
    "SerialWriteQueue",
    "SubmissionLog",
    "dump_json",
    "ensure_dir",
    "load_json",
    "save_json_atomic",
]
