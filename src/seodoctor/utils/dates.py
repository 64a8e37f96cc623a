"""Date formatting used in reports and JSON-LD."""

from datetime import date, datetime, timezone
from typing import Any, Optional


def utc_now_iso() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_iso(value: Any) -> Optional[str]:
    """Full ISO string for a date, datetime or already-formatted string; ``None`` otherwise."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return None


def date_only(value: Any) -> Optional[str]:
    """
    ``YYYY-MM-DD`` part of an ISO string, date or datetime.

    >>> date_only("2024-03-01T10:00:00Z")
    '2024-03-01'
    >>> date_only(None) is None
    True
    """
    if not value:
        return None
    if isinstance(value, str):
        return value.split("T")[0]
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return None
