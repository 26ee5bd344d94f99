"""
Shared infrastructure for the fleet console.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- models: Envelope, pagination and user models
- storage / session / navigation: Session persistence and route state

Note: Resource logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    FleetConsoleError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ExternalServiceError,
)
from .models import User, Pagination, Envelope
from .navigation import Navigator
from .session import SessionContext, TOKEN_KEY, USER_KEY
from .storage import ISessionStorage, MemoryStorage, FileStorage

__all__ = [
    "Settings",
    "get_settings",
    "FleetConsoleError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "ExternalServiceError",
    "User",
    "Pagination",
    "Envelope",
    "Navigator",
    "SessionContext",
    "TOKEN_KEY",
    "USER_KEY",
    "ISessionStorage",
    "MemoryStorage",
    "FileStorage",
]
