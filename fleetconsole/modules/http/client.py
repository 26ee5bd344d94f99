"""
Async HTTP client for the fleet API.

Single point of outbound request construction and inbound response
normalization:
- injects ``Authorization: Bearer <token>`` from the session context
- returns the decoded envelope on 2xx
- raises ApiError subclasses on non-2xx, NetworkError on transport failure
- on 401 clears the session and forces the login route before raising
"""

import logging
from typing import Any, Callable, Optional

import httpx

from fleetconsole.shared.config import get_settings
from fleetconsole.shared.session import SessionContext

from .exceptions import (
    ApiError,
    NetworkError,
    PermissionDeniedError,
    RequestValidationError,
    ResourceNotFoundError,
    SessionExpiredError,
)

logger = logging.getLogger(__name__)

UnauthorizedListener = Callable[[], None]


def clean_params(params: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Drop keys whose value is None so absent filters never hit the wire."""
    if not params:
        return {}
    return {k: v for k, v in params.items() if v is not None}


def _parse_body(response: httpx.Response) -> dict[str, Any]:
    if not response.content:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {"data": body}


class ApiClient:
    """
    Thin wrapper around httpx.AsyncClient bound to one session.

    Usage:
        async with ApiClient(session) as api:
            envelope = await api.get("/vehicles", params={"limit": 20})
    """

    def __init__(
        self,
        session: SessionContext,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.session = session
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._unauthorized_listeners: list[UnauthorizedListener] = []
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def add_unauthorized_listener(self, listener: UnauthorizedListener) -> None:
        """Register a callback run after a 401 has cleared the session."""
        self._unauthorized_listeners.append(listener)

    def _auth_headers(self) -> dict[str, str]:
        token = self.session.token
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Issue one request and return the decoded response envelope.

        Args:
            method: HTTP verb
            path: Route relative to the API base path (e.g. "/vehicles")
            body: JSON-serializable request body, omitted when None
            params: Query parameters; None values are dropped

        Returns:
            The response body, e.g. {"success": True, "data": {...}}

        Raises:
            SessionExpiredError: On 401, after the session has been cleared
            RequestValidationError: On 400
            PermissionDeniedError: On 403
            ResourceNotFoundError: On 404
            ApiError: On any other non-2xx status
            NetworkError: When no response was received
        """
        method = method.upper()
        kwargs: dict[str, Any] = {
            "params": clean_params(params),
            "headers": self._auth_headers(),
        }
        if body is not None:
            kwargs["json"] = body

        logger.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.debug(f"{method} {path} failed without a response: {e!r}")
            raise NetworkError(str(e) or e.__class__.__name__) from e

        if response.is_success:
            return _parse_body(response)

        raise self._error_for(response, method, path)

    def _error_for(self, response: httpx.Response, method: str, path: str) -> ApiError:
        status = response.status_code
        body = _parse_body(response)
        message = body.get("message") or response.reason_phrase or (
            f"Request failed with status code {status}"
        )

        if status == 401:
            logger.warning(f"{method} {path} returned 401, clearing session")
            self.session.invalidate()
            for listener in self._unauthorized_listeners:
                listener()
            return SessionExpiredError(message, body=body)

        if status == 400:
            errors = body.get("errors")
            if isinstance(errors, list) and errors:
                detail = "; ".join(
                    str(e.get("message", e)) if isinstance(e, dict) else str(e)
                    for e in errors
                )
                message = f"{message}: {detail}"
            else:
                errors = []
            return RequestValidationError(message, body=body, errors=errors)

        if status == 403:
            return PermissionDeniedError(message, body=body)

        if status == 404:
            return ResourceNotFoundError(message, body=body)

        return ApiError(message, status, body=body)

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Optional[Any] = None) -> dict[str, Any]:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Optional[Any] = None) -> dict[str, Any]:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> dict[str, Any]:
        return await self.request("DELETE", path)
