"""
timezone_utils.py: Standardized timezone handling across the application

This module decides what "local time" means for the bot (the TIMEZONE
setting, or the host timezone) and converts calendar values into it so
that day filtering and display agree with each other.
"""

from datetime import datetime, date, time, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz

from utils.environ import TIMEZONE
from utils.logging import logger

_timezone_cache: Optional[tzinfo] = None


def get_timezone(tz_name: Optional[str]) -> tzinfo:
    """
    Get a tzinfo object for the specified timezone name.

    Args:
        tz_name: IANA timezone name (e.g. "Europe/Paris"), or empty for the host zone

    Returns:
        A ZoneInfo for valid names, otherwise the host's local timezone.
    """
    if not tz_name:
        return tz.tzlocal()
    try:
        return ZoneInfo(tz_name.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"Invalid timezone '{tz_name}', falling back to host timezone: {e}")
        return tz.tzlocal()


def get_local_timezone() -> tzinfo:
    """Return the configured local timezone, cached after the first lookup."""
    global _timezone_cache
    if _timezone_cache is None:
        _timezone_cache = get_timezone(TIMEZONE)
    return _timezone_cache


def get_today(local_tz: Optional[tzinfo] = None) -> date:
    """Current calendar date in local time."""
    return datetime.now(tz=local_tz or get_local_timezone()).date()


def to_local_datetime(value: Union[datetime, date], local_tz: Optional[tzinfo] = None) -> datetime:
    """
    Normalize a calendar value into an aware datetime in local time.

    Args:
        value: A datetime (aware or floating) or a date (all-day value)
        local_tz: Target timezone, defaults to get_local_timezone()

    Returns:
        Timezone-aware datetime. Dates are anchored at local midnight and
        naive datetimes are interpreted as local wall-clock time.
    """
    local_tz = local_tz or get_local_timezone()
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=local_tz)
        return value.astimezone(local_tz)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=local_tz)
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")
