"""
Content contract models.

Pydantic models for document summaries shown by the CLI.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from folio.helpers.dto.content_dto import DocumentSummary


class DocumentSummaryModel(BaseModel):
    """Dashboard counts, serialized with the camelCase keys the site admin uses."""

    model_config = ConfigDict(populate_by_name=True)

    nav_links: int = Field(alias="navLinks")
    projects: int
    casestudies: int
    experience: int
    certifications: int
    blog_posts: int = Field(alias="blogPosts")
    submissions: int
    enabled_sections: int = Field(alias="enabledSections")

    @classmethod
    def from_dto(cls, dto: DocumentSummary) -> DocumentSummaryModel:
        """Convert DTO to Pydantic model."""
        return cls(
            nav_links=dto.nav_links,
            projects=dto.projects,
            casestudies=dto.casestudies,
            experience=dto.experience,
            certifications=dto.certifications,
            blog_posts=dto.blog_posts,
            submissions=dto.submissions,
            enabled_sections=dto.enabled_sections,
        )
