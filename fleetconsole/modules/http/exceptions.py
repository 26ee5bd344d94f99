"""
HTTP client exceptions.

Every failed request surfaces as one of these. Callers show ``message``
to the user directly; ``body`` keeps the parsed error payload.
"""

from typing import Any, Optional

from fleetconsole.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)

SERVICE_NAME = "fleet-api"

NETWORK_ERROR_MESSAGE = "Unable to connect to server. Please check your connection."


class ApiError(ExternalServiceError):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Optional[dict[str, Any]] = None,
        code: Optional[str] = None,
    ):
        super().__init__(
            message,
            service=SERVICE_NAME,
            code=code or "API_ERROR",
            details={"status_code": status_code},
        )
        self.status_code = status_code
        self.body = body or {}


class RequestValidationError(ApiError, ValidationError):
    """Raised on 400 responses; ``errors`` holds the per-field messages."""

    def __init__(
        self,
        message: str,
        body: Optional[dict[str, Any]] = None,
        errors: Optional[list[dict[str, Any]]] = None,
    ):
        super().__init__(message, 400, body=body, code="VALIDATION_FAILED")
        self.errors = errors or []
        self.details["errors"] = self.errors


class ResourceNotFoundError(ApiError, NotFoundError):
    """Raised on 404 responses."""

    def __init__(self, message: str, body: Optional[dict[str, Any]] = None):
        super().__init__(message, 404, body=body, code="NOT_FOUND")


class PermissionDeniedError(ApiError, AuthorizationError):
    """Raised on 403 responses. The session stays valid."""

    def __init__(self, message: str, body: Optional[dict[str, Any]] = None):
        super().__init__(message, 403, body=body, code="FORBIDDEN")


class SessionExpiredError(ApiError, AuthenticationError):
    """
    Raised on 401 responses.

    By the time this is raised the session has already been cleared and
    the navigator sent to the login route.
    """

    def __init__(self, message: str, body: Optional[dict[str, Any]] = None):
        super().__init__(message, 401, body=body, code="SESSION_EXPIRED")


class NetworkError(ExternalServiceError):
    """Raised when no response was received (connection refused, timeout)."""

    def __init__(self, reason: str, message: str = NETWORK_ERROR_MESSAGE):
        super().__init__(
            message,
            service=SERVICE_NAME,
            code="NETWORK_ERROR",
            details={"reason": reason},
        )
        self.reason = reason
