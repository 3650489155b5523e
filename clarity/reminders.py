from datetime import datetime, time
from typing import Any, Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# The reminder cron runs every 10 minutes; a [25, 35) window around the
# 30-minute mark fires each event exactly once.
WINDOW_START_MINUTES = 25
WINDOW_END_MINUTES = 35
DEFAULT_URL = "/dashboard"


def _zone(tz_name: Optional[str]) -> ZoneInfo:
    try:
        return ZoneInfo(tz_name or "UTC")
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo("UTC")


def _parse_time(raw: Optional[str]) -> Optional[time]:
    if not raw:
        return None
    try:
        hour, minute = [int(part) for part in raw.strip().split(":")[:2]]
        return time(hour, minute)
    except ValueError:
        return None


def event_start(event: Any, tz_name: Optional[str] = None) -> Optional[datetime]:
    start_time = _parse_time(getattr(event, "time", None))
    event_date = getattr(event, "date", None)
    if start_time is None or event_date is None:
        return None
    return datetime.combine(event_date, start_time, tzinfo=_zone(tz_name))


def is_due(start: datetime, now: datetime) -> bool:
    minutes = (start - now).total_seconds() / 60
    return WINDOW_START_MINUTES <= minutes < WINDOW_END_MINUTES


def find_due_reminders(events: Iterable[Any], now: datetime, tz_name: Optional[str] = None) -> List[Dict[str, Any]]:
    due: List[Dict[str, Any]] = []
    for event in events:
        start = event_start(event, tz_name)
        if start is None or not is_due(start, now):
            continue
        due.append(
            {
                "event_id": event.id,
                "title": "Upcoming Event",
                "body": f'"{event.title}" is starting in 30 minutes!',
                "url": event.link or DEFAULT_URL,
            }
        )
    return due
