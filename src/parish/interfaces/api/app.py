"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from parish.interfaces.api.resources.access import AccessResource, MenuResource
from parish.interfaces.api.resources.dashboard import DashboardResource
from parish.interfaces.api.resources.events import EventResource, EventsResource
from parish.interfaces.api.resources.health import HealthResource
from parish.interfaces.api.resources.roles import RolesResource

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    access_resource: AccessResource,
    menu_resource: MenuResource,
    roles_resource: RolesResource,
    events_resource: EventsResource,
    event_resource: EventResource,
    dashboard_resource: DashboardResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/access/{module}", access_resource)
    app.add_route("/v1/menu", menu_resource)
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/events", events_resource)
    app.add_route("/v1/events/upcoming", events_resource, suffix="upcoming")
    app.add_route("/v1/events/week", events_resource, suffix="week")
    app.add_route("/v1/events/stats", events_resource, suffix="stats")
    app.add_route("/v1/events/{event_id}", event_resource)
    app.add_route("/v1/dashboard", dashboard_resource)
    return app
