"""
CLI Bootstrap Service - Service Container for CLI Commands

Provides clean DI for CLI commands that need services without a long-running
process around them.

Architecture:
- This is a SERVICE layer module (interfaces → services)
- CLI commands should NOT import persistence modules directly
- CLI commands SHOULD use these bootstrap functions to get service instances

Each call builds fresh stores from the current configuration. Stores own
their write queues, so services built by separate calls do not serialize
against each other; a command builds what it needs once and reuses it.
"""

from __future__ import annotations

import logging
from typing import Any

from folio.persistence.document_store import DocumentStore
from folio.persistence.submission_log import SubmissionLog
from folio.services.domain.content_svc import ContentService
from folio.services.domain.submissions_svc import SubmissionService
from folio.services.infrastructure.config_svc import ConfigService

logger = logging.getLogger(__name__)


def get_config_service(overrides: dict[str, Any] | None = None) -> ConfigService:
    """
    Get ConfigService instance for CLI operations.

    Args:
        overrides: Values from global CLI flags (e.g. {"data_dir": "/srv/site"})

    Returns:
        ConfigService instance
    """
    return ConfigService(overrides)


def get_submission_log(config_service: ConfigService | None = None) -> SubmissionLog:
    """Build the submission log from configuration."""
    storage = (config_service or get_config_service()).make_storage_config()
    return SubmissionLog(storage.submissions_path, max_records=storage.submissions_max)


def get_submission_service(config_service: ConfigService | None = None) -> SubmissionService:
    """
    Get SubmissionService instance for CLI operations.

    Example:
        >>> service = get_submission_service()
        >>> await service.mark_status("9f3c...", "sent")
    """
    return SubmissionService(get_submission_log(config_service))


def get_content_service(config_service: ConfigService | None = None) -> ContentService:
    """
    Get ContentService instance for CLI operations.

    Returns:
        ContentService wired to the configured site document and submission log
    """
    config_service = config_service or get_config_service()
    storage = config_service.make_storage_config()
    logger.debug(f"[CLI Bootstrap] Site document at {storage.site_path}")
    return ContentService(
        DocumentStore(storage.site_path),
        SubmissionLog(storage.submissions_path, max_records=storage.submissions_max),
    )
