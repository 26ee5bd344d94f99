"""Tests for shared/exceptions.py."""

import pytest

from fleetconsole.shared.exceptions import (
    FleetConsoleError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ExternalServiceError,
)


class TestFleetConsoleError:
    def test_error_message(self):
        """FleetConsoleError should store message."""
        error = FleetConsoleError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_error_default_code(self):
        """FleetConsoleError should default code to class name."""
        error = FleetConsoleError("Test error")
        assert error.code == "FleetConsoleError"

    def test_error_custom_code(self):
        """FleetConsoleError should accept custom code."""
        error = FleetConsoleError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_error_default_details(self):
        """FleetConsoleError should default details to empty dict."""
        error = FleetConsoleError("Test error")
        assert error.details == {}

    def test_error_to_dict(self):
        """FleetConsoleError should convert to dict."""
        error = FleetConsoleError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }


class TestSubclasses:
    @pytest.mark.parametrize("cls", [
        NotFoundError,
        ValidationError,
        AuthenticationError,
        AuthorizationError,
        ConfigurationError,
    ])
    def test_inherits_base(self, cls):
        """Every shared error should be catchable as FleetConsoleError."""
        error = cls("Something went wrong")
        assert isinstance(error, FleetConsoleError)
        assert error.code == cls.__name__

    def test_subclass_can_be_caught_as_base(self):
        """Subclasses should be caught by an except on the base."""
        with pytest.raises(FleetConsoleError):
            raise NotFoundError("Vehicle not found")


class TestExternalServiceError:
    def test_stores_service(self):
        """ExternalServiceError should store the service name."""
        error = ExternalServiceError("Backend down", service="fleet-api")
        assert error.service == "fleet-api"
        assert error.details["service"] == "fleet-api"

    def test_merges_details(self):
        """Service should be added alongside caller details."""
        error = ExternalServiceError(
            "Backend down", service="fleet-api", details={"status_code": 503}
        )
        assert error.details == {"status_code": 503, "service": "fleet-api"}
