"""Async atomic store for a single JSON document.

Reads go straight to disk and never wait on the queue. Writes are funnelled
through the store's SerialWriteQueue so concurrent callers cannot interleave
partial writes; the last enqueued write wins.

Blocking file I/O runs in the loop's default executor so the event loop is
never blocked on disk.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from pathlib import Path
from typing import Any

from folio.persistence.json_file import ensure_dir, load_json, save_json_atomic
from folio.persistence.write_queue import SerialWriteQueue

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Owns one JSON file and the queue that serializes writes to it.

    Args:
        path: Backing file; its parent directory is created if missing
        queue: Queue to serialize writes on (a new one is created if omitted)
    """

    def __init__(self, path: str | Path, queue: SerialWriteQueue | None = None) -> None:
        self.path = Path(path)
        self.queue = queue or SerialWriteQueue(name=f"write_queue:{self.path.name}")
        ensure_dir(self.path.parent)

    async def read(self, fallback: Any = None) -> Any:
        """
        Read the current on-disk value.

        Returns fallback if the file is missing or corrupt. Other I/O errors propagate.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, load_json, self.path, fallback)

    async def write(self, value: Any) -> None:
        """
        Replace the whole file with value, serialized behind earlier writes.

        Raises:
            DocumentWriteError: The write failed (the queue still advances)
        """
        snapshot = copy.deepcopy(value)
        await self.queue.submit(lambda: self.write_now(snapshot))

    async def write_now(self, value: Any) -> None:
        """Write immediately, bypassing the queue. Only call from inside a queued operation."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, save_json_atomic, self.path, value)
        logger.debug(f"[document_store] Saved {self.path}")
