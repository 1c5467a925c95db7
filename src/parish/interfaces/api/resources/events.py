"""Event API resources."""

from datetime import date

import falcon.asgi

from parish.application.dto.event_dto import parse_event_template
from parish.application.use_cases.event.create_events import CreateEventsUseCase
from parish.application.use_cases.event.delete_event import DeleteEventUseCase
from parish.application.use_cases.event.get_event import GetEventUseCase
from parish.application.use_cases.event.list_events import ListEventsUseCase
from parish.application.use_cases.event.update_event import UpdateEventUseCase
from parish.domain.exceptions import NotFound, PermissionDenied, ValidationError
from parish.domain.services import AccessEvaluator
from parish.domain.value_objects import Module


def _unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}


def _denied(resp: falcon.asgi.Response, reason: str | None) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {"error": reason or "Access denied"}


def _invalid(resp: falcon.asgi.Response, error: ValidationError) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": error.message, "field": error.field}


def _view_denied(access: AccessEvaluator, role: str | None) -> str | None:
    """None when role may view events from the dashboard or the portal."""
    staff = access.can_navigate(role, Module.EVENTS)
    if staff.allowed or access.can_navigate(role, Module.PORTAL_EVENTS).allowed:
        return None
    return staff.reason


class EventsResource:
    """GET/POST /v1/events plus /upcoming, /week and /stats listings."""

    def __init__(
        self,
        access_evaluator: AccessEvaluator,
        list_events: ListEventsUseCase,
        create_events: CreateEventsUseCase,
    ) -> None:
        self._access = access_evaluator
        self._list = list_events
        self._create = create_events

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List all events, newest first."""
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return
        reason = _view_denied(self._access, user.role)
        if reason:
            _denied(resp, reason)
            return

        events = await self._list.all()
        resp.media = {"items": [e.to_dict() for e in events]}
        resp.status = falcon.HTTP_200

    async def on_get_upcoming(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List events from today on, soonest first."""
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return
        reason = _view_denied(self._access, user.role)
        if reason:
            _denied(resp, reason)
            return

        today = req.get_param_as_date("today") or date.today()
        events = await self._list.upcoming(today)
        resp.media = {"items": [e.to_dict() for e in events]}
        resp.status = falcon.HTTP_200

    async def on_get_week(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List events of the current week (Monday to Saturday)."""
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return
        reason = _view_denied(self._access, user.role)
        if reason:
            _denied(resp, reason)
            return

        today = req.get_param_as_date("today") or date.today()
        events = await self._list.current_week(today)
        resp.media = {"items": [e.to_dict() for e in events]}
        resp.status = falcon.HTTP_200

    async def on_get_stats(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return
        decision = self._access.can_navigate(user.role, Module.EVENTS)
        if not decision.allowed:
            _denied(resp, decision.reason)
            return

        today = req.get_param_as_date("today") or date.today()
        resp.media = await self._list.stats(today)
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create an event, expanding recurring templates into instances."""
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be a JSON object"}
            return

        try:
            template = parse_event_template(body)
            result = await self._create.execute(user.role, template)
        except PermissionDenied as e:
            _denied(resp, str(e))
            return
        except ValidationError as e:
            _invalid(resp, e)
            return

        resp.media = result.to_dict()
        if result.failed == 0:
            resp.status = falcon.HTTP_201
        elif result.succeeded == 0:
            resp.status = falcon.HTTP_502
        else:
            resp.status = falcon.HTTP_207


class EventResource:
    """GET/PATCH/DELETE /v1/events/{event_id}."""

    def __init__(
        self,
        access_evaluator: AccessEvaluator,
        get_event: GetEventUseCase,
        update_event: UpdateEventUseCase,
        delete_event: DeleteEventUseCase,
    ) -> None:
        self._access = access_evaluator
        self._get = get_event
        self._update = update_event
        self._delete = delete_event

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, event_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return
        reason = _view_denied(self._access, user.role)
        if reason:
            _denied(resp, reason)
            return

        try:
            event = await self._get.execute(event_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Event not found"}
            return
        resp.media = event.to_dict()
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, event_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be a JSON object"}
            return

        try:
            event = await self._update.execute(user.role, event_id, body)
        except PermissionDenied as e:
            _denied(resp, str(e))
            return
        except ValidationError as e:
            _invalid(resp, e)
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Event not found"}
            return
        resp.media = event.to_dict()
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, event_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        try:
            await self._delete.execute(user.role, event_id)
        except PermissionDenied as e:
            _denied(resp, str(e))
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Event not found"}
            return
        resp.status = falcon.HTTP_204
