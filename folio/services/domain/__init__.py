"""Domain services package."""

from .content_svc import ContentService
from .submissions_svc import SubmissionService

__all__ = ["ContentService", "SubmissionService"]
