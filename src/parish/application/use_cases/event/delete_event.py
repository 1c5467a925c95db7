"""Delete event use case."""

from parish.application.dto.event_dto import EVENTS_COLLECTION
from parish.application.ports import DocumentStore
from parish.domain.services import AccessEvaluator
from parish.domain.value_objects import Module, Role


class DeleteEventUseCase:
    """Delete a single event."""

    def __init__(self, document_store: DocumentStore, access_evaluator: AccessEvaluator) -> None:
        self._store = document_store
        self._access = access_evaluator

    async def execute(self, role: Role | str | None, event_id: str) -> None:
        self._access.require(role, Module.EVENTS)
        await self._store.delete(EVENTS_COLLECTION, event_id)
