"""Update event use case."""

from datetime import UTC, date, datetime

from parish.application.dto.event_dto import EVENTS_COLLECTION, RECURRENCE_FIELDS
from parish.application.ports import DocumentStore
from parish.domain.entities import Event
from parish.domain.exceptions import ValidationError
from parish.domain.services import AccessEvaluator
from parish.domain.value_objects import Module, Role

EDITABLE_FIELDS = ("title", "description", "date", "time", "location", "type", "zoomLink", "attendees")


class UpdateEventUseCase:
    """Patch a single persisted event. Editing never re-expands recurrence."""

    def __init__(self, document_store: DocumentStore, access_evaluator: AccessEvaluator) -> None:
        self._store = document_store
        self._access = access_evaluator

    async def execute(self, role: Role | str | None, event_id: str, changes: dict) -> Event:
        self._access.require(role, Module.EVENTS)

        for key in changes:
            if key in RECURRENCE_FIELDS:
                raise ValidationError(key, "recurrence cannot be changed on an existing event")
            if key not in EDITABLE_FIELDS:
                raise ValidationError(key, "unknown field")

        patch = dict(changes)
        if "title" in patch and not str(patch["title"] or "").strip():
            raise ValidationError("title", "is required")
        if "date" in patch:
            try:
                patch["date"] = date.fromisoformat(str(patch["date"])).isoformat()
            except ValueError:
                raise ValidationError("date", f"malformed date: {patch['date']!r}") from None
        if "attendees" in patch:
            value = patch["attendees"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValidationError("attendees", "must be a non-negative integer")
        patch["updatedAt"] = datetime.now(UTC).isoformat()

        updated = await self._store.update(EVENTS_COLLECTION, event_id, patch)
        return Event.from_document(updated)
