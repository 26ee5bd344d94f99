"""Resource module exceptions."""

from fleetconsole.shared.exceptions import NotFoundError


class UnknownResourceError(NotFoundError):
    """Raised when a resource name does not match any collection."""

    def __init__(self, name: str, known: list[str]):
        super().__init__(
            f"Unknown resource: {name}. Valid resources: {', '.join(known)}",
            code="UNKNOWN_RESOURCE",
            details={"resource": name, "known": known},
        )
