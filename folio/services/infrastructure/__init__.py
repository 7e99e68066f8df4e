"""Infrastructure services package."""

from .cli_bootstrap_svc import get_config_service, get_content_service, get_submission_log, get_submission_service
from .config_svc import ConfigService

__all__ = [
    "ConfigService",
    "get_config_service",
    "get_content_service",
    "get_submission_log",
    "get_submission_service",
]
