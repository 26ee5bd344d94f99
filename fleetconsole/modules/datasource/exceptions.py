"""Data-source exceptions."""

from fleetconsole.shared.exceptions import ConfigurationError, NotFoundError


class NoDemoDataError(NotFoundError):
    """Raised when demo mode is asked for a resource it has no samples for."""

    def __init__(self, resource: str):
        super().__init__(
            f"No demo data for resource: {resource}",
            code="NO_DEMO_DATA",
            details={"resource": resource},
        )


class UnknownSourceError(ConfigurationError):
    """Raised for an unrecognized data_source setting."""

    def __init__(self, mode: str):
        super().__init__(
            f"Unknown data source: {mode}. Valid sources: live, demo, fallback",
            code="UNKNOWN_DATA_SOURCE",
            details={"mode": mode},
        )
