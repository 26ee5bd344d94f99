"""
Base exception classes for the fleet console.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class FleetConsoleError(Exception):
    """
    Base exception for all fleet console errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for display or logging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(FleetConsoleError):
    """Resource not found."""

    pass


class ValidationError(FleetConsoleError):
    """Input validation failed."""

    pass


class AuthenticationError(FleetConsoleError):
    """Authentication failed (invalid, expired or missing session)."""

    pass


class AuthorizationError(FleetConsoleError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConfigurationError(FleetConsoleError):
    """Settings are missing or inconsistent."""

    pass


class ExternalServiceError(FleetConsoleError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
