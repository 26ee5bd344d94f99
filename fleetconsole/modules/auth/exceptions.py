"""
Auth module exceptions.

The store itself reports failures through AuthResult; these are raised
only for misuse of the store.
"""

from fleetconsole.shared.exceptions import AuthenticationError


class NotAuthenticatedError(AuthenticationError):
    """Raised when an operation needs a logged-in user and there is none."""

    def __init__(self, message: str = "Not logged in"):
        super().__init__(message, code="NOT_AUTHENTICATED")
