"""
events package: calendar feed retrieval and day filtering,
re‑exporting from submodules.
"""
from .models import *
from .event_fetching import *

__all__ = [
    'Event', 'DayWindow', 'LookupResult',
    'fetch_feed', 'parse_feed', 'filter_events_for_day',
    'get_events_for_day', 'get_events_for_day_async',
]
