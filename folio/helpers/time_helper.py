"""Time utility helpers."""

from datetime import datetime, timezone


def now_iso() -> str:
    """
    Get the current UTC time as an ISO-8601 string with millisecond precision.

    Returns:
        Timestamp like "2026-01-29T14:03:12.407Z"
    """
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
