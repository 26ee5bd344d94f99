"""User administration endpoints."""

from typing import Any

from .base import RecordId, ResourceClient


class UsersApi(ResourceClient):
    resource = "users"

    async def activate(self, id: RecordId) -> dict[str, Any]:
        return await self._api.put(self._path(id, "activate"))

    async def unlock(self, id: RecordId) -> dict[str, Any]:
        return await self._api.put(self._path(id, "unlock"))
