"""Create events use case - expand a template and persist each instance."""

import logging
from datetime import UTC, datetime

from parish.application.dto.event_dto import (
    EVENTS_COLLECTION,
    EventBatchResult,
    InstanceFailure,
)
from parish.application.ports import DocumentStore
from parish.domain.entities import Event, EventTemplate
from parish.domain.services import AccessEvaluator, RecurrenceExpander
from parish.domain.value_objects import Module, Role

logger = logging.getLogger(__name__)


class CreateEventsUseCase:
    """Expand an event template and persist every instance independently."""

    def __init__(
        self,
        document_store: DocumentStore,
        access_evaluator: AccessEvaluator,
        expander: RecurrenceExpander,
    ) -> None:
        self._store = document_store
        self._access = access_evaluator
        self._expander = expander

    async def execute(self, role: Role | str | None, template: EventTemplate) -> EventBatchResult:
        """Persist all expanded instances. A failed instance never stops the rest."""
        self._access.require(role, Module.EVENTS)
        instances = self._expander.expand(template)

        result = EventBatchResult()
        for index, instance in enumerate(instances):
            now = datetime.now(UTC).isoformat()
            record = {
                **instance.to_document(),
                "attendees": 0,
                "createdAt": now,
                "updatedAt": now,
            }
            try:
                created = await self._store.create(EVENTS_COLLECTION, record)
            except Exception as e:
                logger.warning(
                    "Failed to persist event %r on %s: %s",
                    instance.title,
                    instance.date.isoformat(),
                    e,
                )
                result.failures.append(
                    InstanceFailure(index=index, date=instance.date, reason=str(e) or type(e).__name__)
                )
                continue
            result.created.append(Event.from_document(created))

        logger.info(
            "Created %d of %d event instances for %r",
            result.succeeded,
            len(instances),
            template.title,
        )
        return result
