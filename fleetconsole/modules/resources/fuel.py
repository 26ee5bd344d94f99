"""Fuel log endpoints."""

from typing import Any, Optional

from .base import RecordId, ResourceClient


class FuelApi(ResourceClient):
    resource = "fuel"

    async def verify(self, id: RecordId) -> dict[str, Any]:
        return await self._api.put(self._path(id, "verify"))

    async def approve(
        self, id: RecordId, reimbursement_amount: Optional[float] = None
    ) -> dict[str, Any]:
        return await self._api.put(
            self._path(id, "approve"), {"reimbursementAmount": reimbursement_amount}
        )

    async def get_efficiency(
        self,
        vehicle_id: RecordId,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._api.get(
            self._path("vehicle", vehicle_id, "efficiency"),
            params={"startDate": start_date, "endDate": end_date},
        )
