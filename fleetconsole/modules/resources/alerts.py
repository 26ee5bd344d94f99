"""Alert endpoints."""

from typing import Any, Optional

from .base import RecordId, ResourceClient


class AlertsApi(ResourceClient):
    resource = "alerts"

    async def get_active(self) -> dict[str, Any]:
        return await self._api.get(self._path("active"))

    async def get_unacknowledged(self) -> dict[str, Any]:
        return await self._api.get(self._path("unacknowledged"))

    async def acknowledge(self, id: RecordId, note: Optional[str] = None) -> dict[str, Any]:
        return await self._api.put(self._path(id, "acknowledge"), {"note": note})

    async def resolve(
        self, id: RecordId, note: Optional[str] = None, action: Optional[str] = None
    ) -> dict[str, Any]:
        return await self._api.put(self._path(id, "resolve"), {"note": note, "action": action})

    async def dismiss(self, id: RecordId) -> dict[str, Any]:
        return await self._api.put(self._path(id, "dismiss"))

    async def get_by_vehicle(self, vehicle_id: RecordId, status: Optional[str] = None) -> dict[str, Any]:
        return await self._api.get(self._path("vehicle", vehicle_id), params={"status": status})

    async def get_by_driver(self, driver_id: RecordId, status: Optional[str] = None) -> dict[str, Any]:
        return await self._api.get(self._path("driver", driver_id), params={"status": status})
