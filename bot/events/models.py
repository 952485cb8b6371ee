"""
models.py: Plain data records for calendar lookups.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, time, tzinfo
from typing import List, Optional

from utils.error_handling import CalendarError


@dataclass(frozen=True)
class Event:
    """One VEVENT from the feed, with start/end already in local time."""
    start: datetime
    end: datetime
    title: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class DayWindow:
    """Closed interval [00:00:00.000, 23:59:59.999] of one local calendar day."""
    start: datetime
    end: datetime

    @classmethod
    def for_date(cls, day: date, local_tz: tzinfo) -> "DayWindow":
        start = datetime.combine(day, time.min, tzinfo=local_tz)
        end = datetime.combine(day, time(23, 59, 59, 999000), tzinfo=local_tz)
        return cls(start=start, end=end)

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


@dataclass
class LookupResult:
    """
    Outcome of a planning lookup for one day.

    Either `error` is set (and `events` is empty) or `events` holds the
    matching events in feed order, possibly none.
    """
    day: date
    events: List[Event] = field(default_factory=list)
    error: Optional[CalendarError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        return self.ok and not self.events

    @classmethod
    def failure(cls, day: date, error: CalendarError) -> "LookupResult":
        return cls(day=day, events=[], error=error)

