"""Derived, read-only views over the catalog and ledger used by the dashboards."""
import calendar
import logging
from datetime import date, datetime, time
from typing import Any, Iterable, Optional

import pytz

from eventhub.schemas.event import Event, EventStatus
from eventhub.schemas.registration import Registration

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value


def available_spots(event: Event) -> int:
    """Seats left, floored at zero. The stored booking_count is never clamped."""
    return max(event.capacity - event.booking_count, 0)


def is_full(event: Event) -> bool:
    return available_spots(event) == 0


def organizer_revenue(events: Iterable[Event]) -> float:
    return sum(e.booking_count * e.price for e in events)


def organizer_summary(events: Iterable[Event]) -> dict[str, Any]:
    """Headline numbers for an organizer's dashboard."""
    events = list(events)
    return {
        "total_events": len(events),
        "total_registrations": sum(e.booking_count for e in events),
        "total_revenue": organizer_revenue(events),
        "active_events": sum(1 for e in events if e.status == EventStatus.active),
    }


def is_upcoming(registration: Registration, now: datetime) -> Optional[bool]:
    """True when the event starts at or after now; None without an event snapshot."""
    if registration.event is None:
        return None
    return _as_utc(registration.event.date) >= _as_utc(now)


def split_upcoming_past(
    registrations: Iterable[Registration],
    now: datetime,
) -> tuple[list[Registration], list[Registration]]:
    """Partition registrations by event date, keeping ledger order in each half."""
    upcoming: list[Registration] = []
    past: list[Registration] = []
    for reg in registrations:
        flag = is_upcoming(reg, now)
        if flag is None:
            continue
        (upcoming if flag else past).append(reg)
    return upcoming, past


def local_midnight(day: date, tz_name: str) -> datetime:
    """Start of day in tz_name, keeping that zone's offset."""
    return pytz.timezone(tz_name).localize(datetime.combine(day, time.min))


def event_day(value: datetime) -> date:
    """Calendar day of an event date as it was stored, in its own offset."""
    return value.date()


def registrations_on_day(registrations: Iterable[Registration], day: date) -> list[Registration]:
    """Registrations whose event falls on day, time of day ignored."""
    return [
        reg for reg in registrations
        if reg.event is not None and event_day(reg.event.date) == day
    ]


def calendar_month(
    registrations: Iterable[Registration],
    year: int,
    month: int,
) -> dict[date, list[Registration]]:
    """Bucket registrations into the days of one month; empty days are omitted."""
    registrations = list(registrations)
    _, days_in_month = calendar.monthrange(year, month)
    buckets: dict[date, list[Registration]] = {}
    for n in range(1, days_in_month + 1):
        day = date(year, month, n)
        on_day = registrations_on_day(registrations, day)
        if on_day:
            buckets[day] = on_day

    logger.debug("Calendar %04d-%02d: %d days booked", year, month, len(buckets))
    return buckets
