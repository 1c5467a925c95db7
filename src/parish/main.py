"""Application entry point and composition root."""

import logging

from parish import __version__
from parish.application.use_cases.dashboard.dashboard_stats import DashboardStatsUseCase
from parish.application.use_cases.event.create_events import CreateEventsUseCase
from parish.application.use_cases.event.delete_event import DeleteEventUseCase
from parish.application.use_cases.event.get_event import GetEventUseCase
from parish.application.use_cases.event.list_events import ListEventsUseCase
from parish.application.use_cases.event.update_event import UpdateEventUseCase
from parish.application.use_cases.role.list_roles import ListRolesUseCase
from parish.config import configure_logging, get_settings
from parish.domain.services import AccessEvaluator, RecurrenceExpander, build_default_registry
from parish.infrastructure.auth.keycloak_provider import KeycloakProvider
from parish.infrastructure.persistence.postgres.connection import create_pool
from parish.infrastructure.persistence.postgres.document_store import PostgresDocumentStore
from parish.interfaces.api.app import create_app
from parish.interfaces.api.middleware.auth import AuthMiddleware
from parish.interfaces.api.middleware.cors import CORSMiddleware
from parish.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from parish.interfaces.api.resources.access import AccessResource, MenuResource
from parish.interfaces.api.resources.dashboard import DashboardResource
from parish.interfaces.api.resources.events import EventResource, EventsResource
from parish.interfaces.api.resources.health import HealthResource
from parish.interfaces.api.resources.roles import RolesResource

logger = logging.getLogger(__name__)


def create_parish_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(settings.database_url)
    document_store = PostgresDocumentStore(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
            role_claim=settings.role_claim,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set, bearer tokens will be rejected")

    registry = build_default_registry()
    access_evaluator = AccessEvaluator(registry)
    logger.info("Parish v%s, role registry %s", __version__, registry.version)

    create_events = CreateEventsUseCase(
        document_store=document_store,
        access_evaluator=access_evaluator,
        expander=RecurrenceExpander(),
    )
    list_events = ListEventsUseCase(document_store)
    get_event = GetEventUseCase(document_store)
    update_event = UpdateEventUseCase(document_store, access_evaluator)
    delete_event = DeleteEventUseCase(document_store, access_evaluator)
    dashboard_stats = DashboardStatsUseCase(document_store, access_evaluator)
    list_roles = ListRolesUseCase(access_evaluator)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        access_resource=AccessResource(access_evaluator),
        menu_resource=MenuResource(access_evaluator),
        roles_resource=RolesResource(list_roles),
        events_resource=EventsResource(access_evaluator, list_events, create_events),
        event_resource=EventResource(access_evaluator, get_event, update_event, delete_event),
        dashboard_resource=DashboardResource(dashboard_stats),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_parish_app(), host=settings.host, port=settings.port)
