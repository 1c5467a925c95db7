"""Event entities - recurring template, expanded instance, persisted event."""

from dataclasses import dataclass
from datetime import date

from parish.domain.value_objects import RecurrencePattern
from parish.domain.value_objects.dates import parse_date


@dataclass(frozen=True)
class EventTemplate:
    """User-submitted event, possibly recurring. Consumed once by expansion."""

    title: str
    start_date: date
    description: str = ""
    time: str = ""
    location: str = ""
    type: str = "worship"
    zoom_link: str | None = None
    is_recurring: bool = False
    recurring_pattern: RecurrencePattern | None = None
    recurring_end_date: date | None = None
    recurring_days: tuple[int, ...] = ()


@dataclass(frozen=True)
class EventInstance:
    """One concrete dated occurrence, ready to be persisted."""

    title: str
    date: date
    description: str = ""
    time: str = ""
    location: str = ""
    type: str = "worship"
    zoom_link: str | None = None
    is_recurring: bool = False

    def to_document(self) -> dict:
        """Convert to a document store record."""
        return {
            "title": self.title,
            "description": self.description,
            "date": self.date.isoformat(),
            "time": self.time,
            "location": self.location,
            "type": self.type,
            "zoomLink": self.zoom_link,
            "isRecurring": self.is_recurring,
        }


@dataclass
class Event:
    """Persisted event record."""

    id: str
    title: str
    date: date | None
    description: str = ""
    time: str = ""
    location: str = ""
    type: str = "worship"
    zoom_link: str | None = None
    is_recurring: bool = False
    attendees: int = 0
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> dict:
        """Convert to API representation."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date.isoformat() if self.date else None,
            "time": self.time,
            "location": self.location,
            "type": self.type,
            "zoomLink": self.zoom_link,
            "isRecurring": self.is_recurring,
            "attendees": self.attendees,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_document(cls, data: dict) -> "Event":
        """Create from a document store record."""
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title", ""),
            date=parse_date(data.get("date")),
            description=data.get("description", "") or "",
            time=data.get("time", "") or "",
            location=data.get("location", "") or "",
            type=data.get("type", "worship") or "worship",
            zoom_link=data.get("zoomLink"),
            is_recurring=bool(data.get("isRecurring", False)),
            attendees=int(data.get("attendees") or 0),
            created_at=data.get("createdAt", "") or "",
            updated_at=data.get("updatedAt", "") or "",
        )
