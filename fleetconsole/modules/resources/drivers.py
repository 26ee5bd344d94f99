"""Driver endpoints."""

from typing import Any, Optional

from .base import RecordId, ResourceClient


class DriversApi(ResourceClient):
    resource = "drivers"

    async def get_available(self) -> dict[str, Any]:
        return await self._api.get(self._path("available"))

    async def update_status(
        self, id: RecordId, status: str, availability: Optional[str] = None
    ) -> dict[str, Any]:
        return await self._api.put(
            self._path(id, "status"), {"status": status, "availability": availability}
        )

    async def get_performance(self, id: RecordId) -> dict[str, Any]:
        return await self._api.get(self._path(id, "performance"))
