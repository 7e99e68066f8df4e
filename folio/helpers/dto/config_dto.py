"""
Config domain DTOs.

Data transfer objects for configuration service results.

Rules:
- Import only stdlib and typing (no folio.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StorageConfig:
    """Resolved locations and limits for the two backing files."""

    data_dir: Path
    site_path: Path
    submissions_path: Path
    submissions_max: int
