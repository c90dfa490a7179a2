"""Date helpers for scheduling and displaying events."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

DEFAULT_EVENT_LENGTH = timedelta(hours=1)

_DATE_FORMAT = "%d/%m/%Y"
_TIME_FORMAT = "%H:%M"


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; a trailing ``Z`` means UTC.

    Returns None for empty input.

    Raises:
        ValueError: If *value* is not a valid ISO-8601 timestamp.
    """
    if not value or not value.strip():
        return None
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def round_to_half_hour(dt: datetime) -> datetime:
    """Round to the nearest :00 or :30; exactly :15 and :45 round up."""
    base = dt.replace(minute=0, second=0, microsecond=0)
    half_hours = int(dt.minute / 30 + 0.5)
    return base + timedelta(minutes=30 * half_hours)


def default_end(start: datetime) -> datetime:
    return start + DEFAULT_EVENT_LENGTH


def is_upcoming(event_date: datetime, now: Optional[datetime] = None) -> bool:
    if now is None:
        now = datetime.now(event_date.tzinfo)
    return event_date >= now


def days_until(event_date: datetime, today: Optional[date] = None) -> int:
    """Calendar days from *today* to the event's date; negative if past."""
    if today is None:
        today = datetime.now(event_date.tzinfo).date()
    elif isinstance(today, datetime):
        today = today.date()
    return (event_date.date() - today).days


def format_event_range(start: datetime, end: datetime) -> str:
    """Render an event's time span, collapsing the date when it fits one day."""
    if start.date() == end.date():
        return (
            f"{start.strftime(_DATE_FORMAT)}, "
            f"{start.strftime(_TIME_FORMAT)} - {end.strftime(_TIME_FORMAT)}"
        )
    return (
        f"{start.strftime(_DATE_FORMAT)} {start.strftime(_TIME_FORMAT)} - "
        f"{end.strftime(_DATE_FORMAT)} {end.strftime(_TIME_FORMAT)}"
    )
