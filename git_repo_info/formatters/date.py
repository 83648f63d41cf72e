"""Date and time formatting utilities."""

from datetime import datetime, timezone
from typing import Optional

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def format_timestamp(timestamp: datetime) -> str:
    """
    Format a commit timestamp as a UTC string.

    Args:
        timestamp: Timezone-aware datetime

    Returns:
        String like "2014-08-29 16:09:40 UTC"
    """
    return timestamp.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def format_age(timestamp: datetime, now: Optional[datetime] = None) -> str:
    """
    Format how long ago a timestamp was, in calendar days.

    Args:
        timestamp: Timezone-aware datetime
        now: Reference time (defaults to the current UTC time)

    Returns:
        Formatted age string such as "0d" or "12d"
    """
    now = now or datetime.now(timezone.utc)
    age_days = (now.astimezone(timezone.utc).date() - timestamp.astimezone(timezone.utc).date()).days
    return f"{max(age_days, 0)}d"
