"""Export module exceptions."""

from fleetconsole.shared.exceptions import ValidationError


class ExportError(ValidationError):
    """Raised when there is nothing to export or the target is unusable."""

    def __init__(self, message: str = "No data to export"):
        super().__init__(message, code="EXPORT_ERROR")
