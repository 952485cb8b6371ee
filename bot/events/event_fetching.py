"""
event_fetching.py: Calendar feed download, parsing and day filtering.
"""
import asyncio
from datetime import date, datetime, tzinfo
from typing import List, Optional

import requests
from icalendar import Calendar

from utils.environ import ICAL_URL, ICAL_FETCH_TIMEOUT
from utils.error_handling import CalendarError, FetchError, ParseError
from utils.logging import logger
from utils.timezone_utils import get_local_timezone, to_local_datetime
from .models import DayWindow, Event, LookupResult

REQUEST_HEADERS = {
    'User-Agent': 'Mozilla/5.0 (compatible; Planning-Bot/1.0)',
    'Accept': 'text/calendar, text/plain, */*',
}

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ FEED DOWNLOAD                                                              ║
# ╚════════════════════════════════════════════════════════════════════════════╝

def fetch_feed(url: Optional[str], timeout: Optional[float] = None) -> str:
    """
    Download the raw iCalendar document.

    Raises:
        FetchError: no URL configured, transport failure, or a non-2xx status.
    """
    if not url:
        raise FetchError("Aucune URL de calendrier configurée (ICAL_URL)")
    timeout = timeout or ICAL_FETCH_TIMEOUT
    logger.debug(f"Fetching calendar feed (timeout {timeout}s)")
    try:
        response = requests.get(url, timeout=timeout, headers=REQUEST_HEADERS, allow_redirects=True)
    except requests.exceptions.Timeout as e:
        raise FetchError(f"Délai dépassé après {timeout}s") from e
    except requests.exceptions.RequestException as e:
        raise FetchError(f"Erreur réseau: {e}") from e

    if not 200 <= response.status_code < 300:
        raise FetchError(
            f"Erreur HTTP: {response.status_code} {response.reason}",
            status_code=response.status_code,
        )
    # iCalendar is UTF-8; requests would otherwise guess ISO-8859-1 for text/*
    response.encoding = 'utf-8'
    return response.text

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ FEED PARSING                                                               ║
# ╚════════════════════════════════════════════════════════════════════════════╝

def _optional_text(component, name: str) -> Optional[str]:
    value = component.get(name)
    if value is None:
        return None
    return str(value)


def _event_from_component(component, local_tz: tzinfo) -> Optional[Event]:
    if "DTSTART" not in component:
        logger.debug(f"Skipping VEVENT without DTSTART (UID={component.get('UID')})")
        return None
    start_raw = component.decoded("DTSTART")
    if "DTEND" in component:
        end_raw = component.decoded("DTEND")
    elif "DURATION" in component:
        end_raw = start_raw + component.decoded("DURATION")
    else:
        end_raw = start_raw

    return Event(
        start=to_local_datetime(start_raw, local_tz),
        end=to_local_datetime(end_raw, local_tz),
        title=_optional_text(component, "SUMMARY"),
        location=_optional_text(component, "LOCATION"),
        description=_optional_text(component, "DESCRIPTION"),
    )


def parse_feed(text: str, local_tz: Optional[tzinfo] = None) -> List[Event]:
    """
    Parse an iCalendar document into events, preserving feed order.

    Raises:
        ParseError: the body is not valid iCalendar.
    """
    local_tz = local_tz or get_local_timezone()
    try:
        calendar = Calendar.from_ical(text)
        events = []
        for component in calendar.walk("VEVENT"):
            event = _event_from_component(component, local_tz)
            if event is not None:
                events.append(event)
    except (ValueError, TypeError) as e:
        raise ParseError(f"Calendrier illisible: {e}") from e
    logger.debug(f"Parsed {len(events)} events from calendar feed")
    return events

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ DAY FILTERING                                                              ║
# ╚════════════════════════════════════════════════════════════════════════════╝

def filter_events_for_day(events: List[Event], day: date, local_tz: Optional[tzinfo] = None) -> List[Event]:
    """Keep events starting within the day's window, in their original order."""
    window = DayWindow.for_date(day, local_tz or get_local_timezone())
    return [event for event in events if window.contains(event.start)]

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ PLANNING LOOKUP                                                            ║
# ╚════════════════════════════════════════════════════════════════════════════╝

def get_events_for_day(
    day: date,
    url: Optional[str] = None,
    local_tz: Optional[tzinfo] = None,
    timeout: Optional[float] = None,
) -> LookupResult:
    """
    Fetch the feed and return the events of `day`.

    Never raises for fetch or parse failures; they are returned in
    `LookupResult.error` so callers can branch on the error type.
    """
    url = url or ICAL_URL
    local_tz = local_tz or get_local_timezone()
    started = datetime.now()
    try:
        text = fetch_feed(url, timeout)
        events = parse_feed(text, local_tz)
    except CalendarError as e:
        logger.warning(f"Planning lookup for {day.isoformat()} failed ({type(e).__name__}): {e}")
        return LookupResult.failure(day, e)

    matching = filter_events_for_day(events, day, local_tz)
    elapsed = (datetime.now() - started).total_seconds()
    logger.info(f"Found {len(matching)}/{len(events)} events for {day.isoformat()} in {elapsed:.2f}s")
    return LookupResult(day=day, events=matching)


async def get_events_for_day_async(
    day: date,
    url: Optional[str] = None,
    local_tz: Optional[tzinfo] = None,
) -> LookupResult:
    """Run the blocking lookup in a worker thread."""
    return await asyncio.to_thread(get_events_for_day, day, url, local_tz)
