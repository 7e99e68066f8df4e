"""
Services package.
"""

from .domain.content_svc import ContentService
from .domain.submissions_svc import SubmissionService
from .infrastructure.config_svc import ConfigService

__all__ = [
    "ConfigService",
    "ContentService",
    "SubmissionService",
]
