"""Dashboard API resource."""

from datetime import date

import falcon.asgi

from parish.application.use_cases.dashboard.dashboard_stats import DashboardStatsUseCase
from parish.domain.exceptions import PermissionDenied


class DashboardResource:
    """GET /v1/dashboard - stats cards and chart series."""

    def __init__(self, dashboard_stats: DashboardStatsUseCase) -> None:
        self._stats = dashboard_stats

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        today = req.get_param_as_date("today") or date.today()
        try:
            stats = await self._stats.execute(user.role, today)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        resp.media = stats
        resp.status = falcon.HTTP_200
