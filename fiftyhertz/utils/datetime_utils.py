"""
DateTime utilities for handling timezone conversions
"""
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo
from fiftyhertz.core.config import settings

LOCAL_TZ = ZoneInfo(settings.TIMEZONE)


def utcnow() -> datetime:
    """
    Current UTC time as a naive datetime (the form stored in the database)
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_local(dt: datetime) -> datetime:
    """
    Convert any datetime to the configured local timezone
    """
    # Naive values are stored as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(LOCAL_TZ)


def format_datetime(dt: Optional[datetime]) -> Optional[str]:
    """
    Format datetime for API responses: YYYY-MM-DD HH:MM:SS in local time
    """
    if dt is None:
        return None
    return to_local(dt).strftime("%Y-%m-%d %H:%M:%S")
