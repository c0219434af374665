"""Timezone-aware datetime utilities for timestamp prefixes.

All functions return timezone-aware values so that timestamps written in
front of console messages always carry UTC information.
"""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as a timezone-aware datetime.

    Example:
        >>> now = utc_now()
        >>> now.tzinfo is not None
        True
    """
    return datetime.now(UTC)


def normalize_to_utc(dt: datetime) -> datetime:
    """Return ``dt`` in UTC, treating naive datetimes as already UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_iso_utc_millis(dt: datetime) -> str:
    """Format ``dt`` as ISO 8601 in UTC with millisecond precision and a ``Z`` suffix.

    Example:
        >>> to_iso_utc_millis(datetime(2024, 1, 15, 10, 30, 45, 123456, tzinfo=UTC))
        '2024-01-15T10:30:45.123Z'
    """
    text = normalize_to_utc(dt).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


__all__ = ["utc_now", "normalize_to_utc", "to_iso_utc_millis"]
