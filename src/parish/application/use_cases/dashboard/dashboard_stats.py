"""Dashboard stats use case - chart and card aggregates."""

from datetime import date

from parish.application.dto.event_dto import EVENTS_COLLECTION
from parish.application.ports import DocumentStore
from parish.domain.entities import Event
from parish.domain.services import AccessEvaluator, dashboard_metrics, schedule
from parish.domain.value_objects import Module, Role

DONATIONS_COLLECTION = "donations"
MEMBERS_COLLECTION = "members"


class DashboardStatsUseCase:
    """Aggregate donations, members and events for the admin dashboard."""

    def __init__(self, document_store: DocumentStore, access_evaluator: AccessEvaluator) -> None:
        self._store = document_store
        self._access = access_evaluator

    async def execute(self, role: Role | str | None, today: date) -> dict:
        self._access.require(role, Module.DASHBOARD)

        donations = await self._store.list(DONATIONS_COLLECTION)
        members = await self._store.list(MEMBERS_COLLECTION)
        events = [Event.from_document(r) for r in await self._store.list(EVENTS_COLLECTION)]

        return {
            "donations": dashboard_metrics.donation_summary(donations, today),
            "members": dashboard_metrics.member_summary(members),
            "events": schedule.event_stats(events, today),
            "donation_chart": dashboard_metrics.monthly_donation_totals(donations, today),
            "member_growth": dashboard_metrics.member_growth(members, today),
        }
