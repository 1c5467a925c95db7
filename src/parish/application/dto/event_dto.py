"""Event DTOs and request parsing."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date

from parish.domain.entities import Event, EventTemplate
from parish.domain.exceptions import ValidationError
from parish.domain.value_objects import RecurrencePattern

EVENTS_COLLECTION = "events"

RECURRENCE_FIELDS = ("isRecurring", "recurringPattern", "recurringEndDate", "recurringDays")


def _required_date(data: Mapping, key: str) -> date:
    value = data.get(key)
    if not value:
        raise ValidationError(key, "is required")
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(key, f"must be an ISO date string, got {value!r}")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(key, f"malformed date: {value!r}") from None


def _text(data: Mapping, key: str, default: str = "") -> str:
    value = data.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(key, "must be a string")
    return value.strip()


def parse_event_template(data: Mapping) -> EventTemplate:
    """Build an EventTemplate from a request body, rejecting malformed input."""
    title = _text(data, "title")
    if not title:
        raise ValidationError("title", "is required")
    start_date = _required_date(data, "date")

    is_recurring = data.get("isRecurring", False)
    if not isinstance(is_recurring, bool):
        raise ValidationError("isRecurring", "must be a boolean")

    pattern = None
    end_date = None
    days: tuple[int, ...] = ()
    if is_recurring:
        raw_pattern = data.get("recurringPattern")
        if raw_pattern is None:
            raise ValidationError("recurringPattern", "is required for recurring events")
        try:
            pattern = RecurrencePattern(raw_pattern)
        except ValueError:
            raise ValidationError(
                "recurringPattern", f"unsupported pattern: {raw_pattern!r}"
            ) from None
        end_date = _required_date(data, "recurringEndDate")

        raw_days = data.get("recurringDays")
        if raw_days is None:
            raw_days = []
        if not isinstance(raw_days, list | tuple):
            raise ValidationError("recurringDays", "must be a list of weekday numbers")
        for day in raw_days:
            if isinstance(day, bool) or not isinstance(day, int):
                raise ValidationError("recurringDays", f"weekday must be an integer, got {day!r}")
        days = tuple(raw_days)

    return EventTemplate(
        title=title,
        start_date=start_date,
        description=_text(data, "description"),
        time=_text(data, "time"),
        location=_text(data, "location"),
        type=_text(data, "type", "worship") or "worship",
        zoom_link=_text(data, "zoomLink") or None,
        is_recurring=is_recurring,
        recurring_pattern=pattern,
        recurring_end_date=end_date,
        recurring_days=days,
    )


@dataclass
class InstanceFailure:
    """One expanded instance that could not be persisted."""

    index: int
    date: date
    reason: str

    def to_dict(self) -> dict:
        return {"index": self.index, "date": self.date.isoformat(), "reason": self.reason}


@dataclass
class EventBatchResult:
    """Outcome of persisting an expanded template, instance by instance."""

    created: list[Event] = field(default_factory=list)
    failures: list[InstanceFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.created)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def to_dict(self) -> dict:
        return {
            "succeeded": self.succeeded,
            "failed": self.failed,
            "created": [e.to_dict() for e in self.created],
            "failures": [f.to_dict() for f in self.failures],
        }
