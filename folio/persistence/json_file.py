"""Atomic JSON file primitives.

Implements the write-temp-then-replace pattern so a reader never observes a
partially-written file. If the process dies mid-write, the target keeps its
previous complete contents and at worst a stray temp sibling is left behind.

These functions are synchronous; async callers run them in an executor
(see DocumentStore).
"""

from __future__ import annotations

import json
import logging
import os
import uuid
from pathlib import Path
from typing import Any

from folio.helpers.exceptions import DocumentWriteError

logger = logging.getLogger(__name__)


def ensure_dir(dir_path: str | Path) -> Path:
    """Create a directory (and parents) if missing. Idempotent."""
    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def dump_json(value: Any) -> str:
    """Serialize a value the way every Folio file is stored: indent 2, trailing newline."""
    return json.dumps(value, indent=2, ensure_ascii=False) + "\n"


def load_json(path: str | Path, fallback: Any) -> Any:
    """
    Read and parse a JSON file.

    Args:
        path: File to read
        fallback: Returned when the file is missing or does not parse

    Returns:
        Parsed value, or fallback

    Raises:
        OSError: Any I/O failure other than a missing file (permissions, is a directory, ...)
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    except FileNotFoundError:
        return fallback
    except UnicodeDecodeError:
        logger.warning(f"[json_file] {path} is not valid UTF-8, using fallback")
        return fallback

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"[json_file] {path} does not parse ({e.msg} at line {e.lineno}), using fallback")
        return fallback


def save_json_atomic(path: str | Path, value: Any) -> None:
    """
    Write a value as JSON and atomically replace the target file.

    Steps:
    1. Serialize in memory (unserializable values fail before touching disk)
    2. Ensure the parent directory exists
    3. Write to a unique temp sibling, flush and fsync
    4. os.replace() the temp file onto the target

    Args:
        path: Target file
        value: JSON-serializable value

    Raises:
        DocumentWriteError: Serialization or any filesystem step failed
    """
    target = Path(path)

    try:
        raw = dump_json(value)
    except (TypeError, ValueError) as e:
        raise DocumentWriteError(str(target), f"value is not JSON-serializable: {e}") from e

    tmp_path = target.with_name(f".{target.name}.{uuid.uuid4().hex}.tmp")
    try:
        ensure_dir(target.parent)
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(raw)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, target)
    except OSError as e:
        _discard_temp(tmp_path)
        raise DocumentWriteError(str(target), e.strerror or str(e)) from e

    logger.debug(f"[json_file] Wrote {len(raw)} bytes to {target}")


def _discard_temp(tmp_path: Path) -> None:
    """Remove a leftover temp file after a failed write."""
    try:
        tmp_path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"[json_file] Could not remove temp file {tmp_path}: {e}")
