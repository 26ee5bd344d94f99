"""
HTTP client interface.

Resource clients depend on IApiClient, not on ApiClient, so tests can
substitute an AsyncMock.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class IApiClient(Protocol):
    """Contract the resource clients need from the transport layer."""

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        ...

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        ...

    async def post(self, path: str, body: Optional[Any] = None) -> dict[str, Any]:
        ...

    async def put(self, path: str, body: Optional[Any] = None) -> dict[str, Any]:
        ...

    async def delete(self, path: str) -> dict[str, Any]:
        ...
