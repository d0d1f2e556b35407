"""
DateTime Utilities
==================

All persisted timestamps are timezone-aware UTC datetimes truncated to
millisecond precision, which is what a BSON Date can hold.

Functions:
- utc_now(): Current UTC time as a timezone-aware datetime
- ensure_utc(): Normalize naive/aware datetimes into UTC
- to_iso(): Convert datetime object to ISO 8601 string
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def _truncate_to_millis(dt: datetime) -> datetime:
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return _truncate_to_millis(datetime.now(dt_timezone.utc))


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string in UTC ("Z" suffix).
    
    Args:
        dt: datetime object (timezone-aware or naive UTC)
    
    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    utc_dt = ensure_utc(dt)
    if utc_dt is None:
        return None
    return utc_dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
