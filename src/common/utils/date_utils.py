"""Utility functions for date manipulation."""

from datetime import datetime

import pytz

FEED_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_feed_datetime(dt: datetime | None) -> str | None:
    """Formats a datetime the way seller-center feeds expect it."""
    if dt is None:
        return None
    return dt.strftime(FEED_DATETIME_FORMAT)


def parse_feed_datetime(value: datetime | str | None, tz_name: str | None = None) -> datetime | None:
    """Parses a feed or ISO datetime string. Naive results are localized to tz_name when given."""
    if not value:
        return None
    if isinstance(value, datetime):
        dt_obj = value
    else:
        try:
            # Handle both Z and +00:00 for UTC, or local timezone
            dt_obj = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except (ValueError, TypeError):
            return None
    if tz_name and dt_obj.tzinfo is None:
        dt_obj = pytz.timezone(tz_name).localize(dt_obj)
    return dt_obj
