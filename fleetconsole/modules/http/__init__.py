"""
HTTP client module.

Public API:
- IApiClient: Interface resource clients depend on
- ApiClient: Async request wrapper with token injection and 401 handling
- clean_params: Query-parameter normalization
- Exceptions: ApiError, RequestValidationError, ResourceNotFoundError,
  PermissionDeniedError, SessionExpiredError, NetworkError
"""

from .client import ApiClient, clean_params
from .interfaces import IApiClient
from .exceptions import (
    ApiError,
    RequestValidationError,
    ResourceNotFoundError,
    PermissionDeniedError,
    SessionExpiredError,
    NetworkError,
    NETWORK_ERROR_MESSAGE,
)

__all__ = [
    "ApiClient",
    "IApiClient",
    "clean_params",
    "ApiError",
    "RequestValidationError",
    "ResourceNotFoundError",
    "PermissionDeniedError",
    "SessionExpiredError",
    "NetworkError",
    "NETWORK_ERROR_MESSAGE",
]
