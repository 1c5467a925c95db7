"""Access API resources - navigation checks and role-filtered menus."""

import falcon.asgi

from parish.domain.services import AccessEvaluator
from parish.domain.value_objects import Role
from parish.interfaces.api.menus import MENUS


class AccessResource:
    """GET /v1/access/{module} - can the current role open a module."""

    def __init__(self, access_evaluator: AccessEvaluator) -> None:
        self._access = access_evaluator

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, module: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        decision = self._access.can_navigate(user.role, module)
        resp.media = {
            "module": module,
            "role": Role.from_claim(user.role).value,
            "allowed": decision.allowed,
            "reason": decision.reason,
        }
        resp.status = falcon.HTTP_200


class MenuResource:
    """GET /v1/menu?portal=admin|member - menu entries the role may open."""

    def __init__(self, access_evaluator: AccessEvaluator) -> None:
        self._access = access_evaluator

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        portal = req.get_param("portal") or "admin"
        menu = MENUS.get(portal)
        if menu is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown portal: {portal}"}
            return

        items = self._access.filter_menu(user.role, menu)
        resp.media = {
            "portal": portal,
            "role": Role.from_claim(user.role).value,
            "items": [item.to_dict() for item in items],
        }
        resp.status = falcon.HTTP_200
