"""Roles API resource."""

import falcon.asgi

from parish.application.use_cases.role.list_roles import ListRolesUseCase
from parish.domain.exceptions import PermissionDenied


class RolesResource:
    """GET /v1/roles - role options for user management."""

    def __init__(self, list_roles: ListRolesUseCase) -> None:
        self._list_roles = list_roles

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            options = self._list_roles.execute(user.role)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        resp.media = {"items": options}
        resp.status = falcon.HTTP_200
