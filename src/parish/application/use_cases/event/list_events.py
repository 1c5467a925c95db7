"""List events use case - all, upcoming, current week, stats."""

from datetime import date

from parish.application.dto.event_dto import EVENTS_COLLECTION
from parish.application.ports import DocumentStore
from parish.domain.entities import Event
from parish.domain.services import schedule


class ListEventsUseCase:
    """Read-side event listings for the dashboard and member portal."""

    def __init__(self, document_store: DocumentStore) -> None:
        self._store = document_store

    async def _load(self) -> list[Event]:
        records = await self._store.list(EVENTS_COLLECTION)
        return [Event.from_document(r) for r in records]

    async def all(self) -> list[Event]:
        """All events, newest first. Undated records go last."""
        events = await self._load()
        return sorted(events, key=lambda e: e.date or date.min, reverse=True)

    async def upcoming(self, today: date) -> list[Event]:
        return schedule.upcoming_events(await self._load(), today)

    async def current_week(self, today: date) -> list[Event]:
        """Events from Monday to Saturday of the current week."""
        return schedule.events_in_week(await self._load(), today)

    async def stats(self, today: date) -> dict:
        return schedule.event_stats(await self._load(), today)
