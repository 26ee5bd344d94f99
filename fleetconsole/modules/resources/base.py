"""
Base class for REST resource clients.

Each method maps to exactly one REST call. No retries, no caching, no
validation: failures propagate from the HTTP client unchanged.
"""

from typing import Any, Optional, Union

from fleetconsole.modules.http.interfaces import IApiClient

RecordId = Union[int, str]


def record_id(record: dict[str, Any]) -> Optional[RecordId]:
    """Return a record's identifier; the backend uses ``id`` or ``_id``."""
    if record.get("id") is not None:
        return record["id"]
    return record.get("_id")


class ResourceClient:
    """
    CRUD + stats passthroughs for one REST collection.

    Subclasses set ``resource`` to the collection path segment and add the
    resource's extra verbs.
    """

    resource: str = ""

    def __init__(self, api: IApiClient):
        self._api = api

    def _path(self, *parts: Any) -> str:
        segments = [self.resource, *(str(p) for p in parts)]
        return "/" + "/".join(segments)

    async def get_all(self, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """List records; ``params`` go out verbatim as query parameters."""
        return await self._api.get(self._path(), params=params or {})

    async def get_by_id(self, id: RecordId) -> dict[str, Any]:
        return await self._api.get(self._path(id))

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._api.post(self._path(), data)

    async def update(self, id: RecordId, data: dict[str, Any]) -> dict[str, Any]:
        return await self._api.put(self._path(id), data)

    async def delete(self, id: RecordId) -> dict[str, Any]:
        return await self._api.delete(self._path(id))

    async def get_stats(self) -> dict[str, Any]:
        return await self._api.get(self._path("stats", "overview"))
