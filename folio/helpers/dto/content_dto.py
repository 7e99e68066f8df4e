"""
Content domain DTOs.

Rules:
- Import only stdlib and typing (no folio.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DocumentSummary:
    """Item counts shown on the operator dashboard."""

    nav_links: int
    projects: int
    casestudies: int
    experience: int
    certifications: int
    blog_posts: int
    submissions: int
    enabled_sections: int
