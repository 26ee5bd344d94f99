"""Vehicle endpoints."""

from typing import Any, Optional

from .base import RecordId, ResourceClient


class VehiclesApi(ResourceClient):
    resource = "vehicles"

    async def get_available(self) -> dict[str, Any]:
        return await self._api.get(self._path("available"))

    async def assign_driver(self, id: RecordId, driver_id: RecordId) -> dict[str, Any]:
        return await self._api.put(self._path(id, "assign-driver"), {"driverId": driver_id})

    async def unassign_driver(self, id: RecordId) -> dict[str, Any]:
        return await self._api.put(self._path(id, "unassign-driver"))

    async def update_status(
        self, id: RecordId, status: str, availability: Optional[str] = None
    ) -> dict[str, Any]:
        return await self._api.put(
            self._path(id, "status"), {"status": status, "availability": availability}
        )
