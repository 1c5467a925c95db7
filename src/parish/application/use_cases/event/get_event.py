"""Get event use case."""

from parish.application.dto.event_dto import EVENTS_COLLECTION
from parish.application.ports import DocumentStore
from parish.domain.entities import Event
from parish.domain.exceptions import NotFound


class GetEventUseCase:
    """Get a single event by id."""

    def __init__(self, document_store: DocumentStore) -> None:
        self._store = document_store

    async def execute(self, event_id: str) -> Event:
        record = await self._store.get(EVENTS_COLLECTION, event_id)
        if record is None:
            raise NotFound("Event", event_id)
        return Event.from_document(record)
