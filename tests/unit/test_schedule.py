"""Unit tests for calendar windows."""

from datetime import date

import pytest

from parish.domain.entities import Event
from parish.domain.services import schedule


def _event(title: str, on: date | None, attendees: int = 0) -> Event:
    return Event(id=title, title=title, date=on, attendees=attendees)


@pytest.mark.parametrize(
    "today",
    [date(2024, 1, 8), date(2024, 1, 10), date(2024, 1, 13), date(2024, 1, 14)],
)
def test_week_window_monday_to_saturday(today: date) -> None:
    """Every day from Monday through the following Sunday maps to the same window."""
    assert schedule.week_window(today) == (date(2024, 1, 8), date(2024, 1, 13))


def test_events_in_week() -> None:
    events = [
        _event("sat", date(2024, 1, 13)),
        _event("sun", date(2024, 1, 14)),
        _event("mon", date(2024, 1, 8)),
        _event("last-week", date(2024, 1, 6)),
        _event("undated", None),
        _event("wed", date(2024, 1, 10)),
    ]
    result = schedule.events_in_week(events, date(2024, 1, 10))
    assert [e.title for e in result] == ["mon", "wed", "sat"]


def test_upcoming_events_from_today() -> None:
    events = [
        _event("later", date(2024, 2, 1)),
        _event("past", date(2024, 1, 9)),
        _event("today", date(2024, 1, 10)),
        _event("undated", None),
    ]
    result = schedule.upcoming_events(events, date(2024, 1, 10))
    assert [e.title for e in result] == ["today", "later"]


def test_event_stats() -> None:
    events = [
        _event("a", date(2024, 1, 1), attendees=30),
        _event("b", date(2024, 1, 20), attendees=12),
        _event("c", None, attendees=3),
    ]
    assert schedule.event_stats(events, date(2024, 1, 10)) == {
        "total": 3,
        "upcoming": 1,
        "past": 1,
        "total_attendees": 45,
    }
