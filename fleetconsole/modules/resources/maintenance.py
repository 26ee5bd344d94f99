"""Maintenance record endpoints."""

from typing import Any, Optional

from .base import RecordId, ResourceClient


class MaintenanceApi(ResourceClient):
    resource = "maintenance"

    async def get_overdue(self) -> dict[str, Any]:
        return await self._api.get(self._path("overdue"))

    async def get_upcoming(self, days: int = 30) -> dict[str, Any]:
        return await self._api.get(self._path("upcoming"), params={"days": days})

    async def start(self, id: RecordId, start_data: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return await self._api.put(self._path(id, "start"), start_data)

    async def complete(
        self, id: RecordId, completion_data: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        return await self._api.put(self._path(id, "complete"), completion_data)

    async def approve(self, id: RecordId, comments: Optional[str] = None) -> dict[str, Any]:
        return await self._api.put(self._path(id, "approve"), {"comments": comments})

    async def get_history(self, vehicle_id: RecordId, status: Optional[str] = None) -> dict[str, Any]:
        return await self._api.get(
            self._path("vehicle", vehicle_id, "history"), params={"status": status}
        )
