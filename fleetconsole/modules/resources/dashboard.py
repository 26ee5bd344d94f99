"""Dashboard endpoints."""

from typing import Any

from fleetconsole.modules.http.interfaces import IApiClient


class DashboardApi:
    def __init__(self, api: IApiClient):
        self._api = api

    async def get_overview(self) -> dict[str, Any]:
        return await self._api.get("/dashboard/overview")

    async def get_activity(self) -> dict[str, Any]:
        return await self._api.get("/dashboard/activity")
