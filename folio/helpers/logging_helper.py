"""
Logging helpers for process setup and safe error handling.

This module provides the single place where logging is configured for a
Folio process, and utilities to prevent information leakage through error
messages while preserving detailed logging for debugging.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure logging once for the whole process.

    Args:
        level: Level name ("DEBUG", "info", ...) or numeric logging level
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def sanitize_exception_message(e: Exception, safe_message: str = "An error occurred") -> str:
    """
    Sanitize exception message for user display.

    Prevents information leakage (absolute paths, OS error details) through
    detailed error messages while preserving the ability to log full details.

    Args:
        e: The exception to sanitize
        safe_message: Generic message to return to users

    Returns:
        Safe error message for user display

    Example:
        >>> try:
        ...     await store.write(document)
        ... except DocumentWriteError as e:
        ...     print_error(sanitize_exception_message(e, "Could not save the site"))
    """
    # Log the full exception for debugging
    logger.error(f"[security] Exception sanitized: {e}", exc_info=e)

    # Return generic message to user
    return safe_message
