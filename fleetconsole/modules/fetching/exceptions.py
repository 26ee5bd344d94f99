"""Request-lifecycle helper exceptions."""

from fleetconsole.shared.exceptions import ValidationError


class EnvelopeShapeError(ValidationError):
    """Raised when a list envelope does not hold exactly one record list."""

    def __init__(self, message: str, keys: list[str]):
        super().__init__(
            message,
            code="ENVELOPE_SHAPE",
            details={"keys": keys},
        )
