"""
Trip endpoints.

start/complete/cancel mirror backend state transitions. Ordering is the
backend's concern; nothing here checks a trip's current status.
"""

from typing import Any, Optional

from .base import RecordId, ResourceClient


class TripsApi(ResourceClient):
    resource = "trips"

    async def get_active(self) -> dict[str, Any]:
        return await self._api.get(self._path("active"))

    async def start(self, id: RecordId, start_data: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return await self._api.put(self._path(id, "start"), start_data)

    async def complete(
        self, id: RecordId, completion_data: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        return await self._api.put(self._path(id, "complete"), completion_data)

    async def cancel(self, id: RecordId, reason: Optional[str] = None) -> dict[str, Any]:
        return await self._api.put(self._path(id, "cancel"), {"reason": reason})
