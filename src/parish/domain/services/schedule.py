"""Calendar windows over persisted events."""

from collections.abc import Iterable
from datetime import date, timedelta

from parish.domain.entities import Event


def week_window(today: date) -> tuple[date, date]:
    """Monday through Saturday of the week containing today.

    Sunday belongs to the week that started the previous Monday.
    """
    monday = today - timedelta(days=today.weekday())
    return monday, monday + timedelta(days=5)


def events_in_week(events: Iterable[Event], today: date) -> list[Event]:
    start, end = week_window(today)
    return sorted(
        (e for e in events if e.date is not None and start <= e.date <= end),
        key=lambda e: e.date,
    )


def upcoming_events(events: Iterable[Event], today: date) -> list[Event]:
    """Events on or after today, soonest first."""
    return sorted(
        (e for e in events if e.date is not None and e.date >= today),
        key=lambda e: e.date,
    )


def event_stats(events: Iterable[Event], today: date) -> dict:
    items = list(events)
    dated = [e for e in items if e.date is not None]
    return {
        "total": len(items),
        "upcoming": sum(1 for e in dated if e.date >= today),
        "past": sum(1 for e in dated if e.date < today),
        "total_attendees": sum(e.attendees for e in items),
    }
