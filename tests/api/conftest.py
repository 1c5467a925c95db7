"""Fixtures for API tests."""

import pytest

from parish.application.use_cases.dashboard.dashboard_stats import DashboardStatsUseCase
from parish.application.use_cases.event.create_events import CreateEventsUseCase
from parish.application.use_cases.event.delete_event import DeleteEventUseCase
from parish.application.use_cases.event.get_event import GetEventUseCase
from parish.application.use_cases.event.list_events import ListEventsUseCase
from parish.application.use_cases.event.update_event import UpdateEventUseCase
from parish.application.use_cases.role.list_roles import ListRolesUseCase
from parish.interfaces.api.app import create_app
from parish.interfaces.api.middleware.auth import RequestUser


class RoleHeaderMiddleware:
    """Middleware that sets context.user from the X-Role header for testing.

    X-Anonymous: 1 leaves the request without a user.
    """

    async def process_request(self, req, resp):
        if req.get_header("X-Anonymous"):
            req.context.user = None
            return
        req.context.user = RequestUser(user_id="test-user-1", role=req.get_header("X-Role"))


def build_app(document_store, access_evaluator, expander, middleware):
    """Falcon ASGI app wired to in-memory ports."""
    from parish.interfaces.api.resources.access import AccessResource, MenuResource
    from parish.interfaces.api.resources.dashboard import DashboardResource
    from parish.interfaces.api.resources.events import EventResource, EventsResource
    from parish.interfaces.api.resources.health import HealthResource
    from parish.interfaces.api.resources.roles import RolesResource

    return create_app(
        access_resource=AccessResource(access_evaluator),
        menu_resource=MenuResource(access_evaluator),
        roles_resource=RolesResource(ListRolesUseCase(access_evaluator)),
        events_resource=EventsResource(
            access_evaluator,
            ListEventsUseCase(document_store),
            CreateEventsUseCase(document_store, access_evaluator, expander),
        ),
        event_resource=EventResource(
            access_evaluator,
            GetEventUseCase(document_store),
            UpdateEventUseCase(document_store, access_evaluator),
            DeleteEventUseCase(document_store, access_evaluator),
        ),
        dashboard_resource=DashboardResource(
            DashboardStatsUseCase(document_store, access_evaluator)
        ),
        health_resource=HealthResource(),
        middleware=middleware,
    )


@pytest.fixture
def app(document_store, access_evaluator, expander):
    return build_app(document_store, access_evaluator, expander, [RoleHeaderMiddleware()])


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)


@pytest.fixture
def make_app(document_store, access_evaluator, expander):
    """Build the app with custom middleware against the shared fakes."""

    def _make(middleware):
        return build_app(document_store, access_evaluator, expander, middleware)

    return _make
