"""
Auth module interface.

Front ends and the role store depend on IAuthStore, not the concrete
implementation. This enables testing with mocks.
"""

from typing import Any, Optional, Protocol, Union, runtime_checkable

from fleetconsole.shared.models import User

from .models import AuthResult, AuthState, LoginCredentials


@runtime_checkable
class IAuthStore(Protocol):
    """
    Interface for session operations.

    Implementations own the single source of truth for whether a user is
    logged in and who they are.
    """

    @property
    def state(self) -> AuthState:
        ...

    @property
    def user(self) -> Optional[User]:
        ...

    @property
    def is_authenticated(self) -> bool:
        ...

    async def check_auth_status(self) -> AuthState:
        """
        Resolve the startup state from the persisted session.

        Returns:
            ANONYMOUS or AUTHENTICATED
        """
        ...

    async def login(self, credentials: Union[LoginCredentials, dict[str, Any]]) -> AuthResult:
        """
        Log in and persist the session.

        Never raises for backend or network failures; returns
        AuthResult(success=False, message=...) instead.
        """
        ...

    async def logout(self) -> None:
        """End the session locally, whatever the server says."""
        ...

    async def register(self, user_data: dict[str, Any]) -> AuthResult:
        ...

    async def update_profile(self, profile_data: dict[str, Any]) -> AuthResult:
        ...
