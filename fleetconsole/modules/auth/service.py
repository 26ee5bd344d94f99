"""
Session/auth store implementation.

Owns the state machine UNKNOWN -> ANONYMOUS | AUTHENTICATED and keeps the
persisted session and the in-memory user in step: every path that clears
the token clears the user in the same synchronous step.
"""

import asyncio
import logging
from typing import Any, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from fleetconsole.modules.resources.auth import AuthApi
from fleetconsole.modules.resources.users import UsersApi
from fleetconsole.shared.exceptions import FleetConsoleError
from fleetconsole.shared.models import Envelope, User
from fleetconsole.shared.session import SessionContext

from .demo import is_demo_token, make_demo_token, match_demo_account
from .interfaces import IAuthStore
from .models import AuthResult, AuthState, DemoAccount, LoginCredentials

logger = logging.getLogger(__name__)


class AuthStore(IAuthStore):
    """
    Single-owner session store.

    Transitions are serialized with an asyncio.Lock so a startup check and
    a login can never interleave. The HTTP client's 401 handling reaches
    the store through ``handle_session_invalidated``.
    """

    def __init__(
        self,
        auth_api: AuthApi,
        users_api: UsersApi,
        session: SessionContext,
        demo_accounts: Optional[dict[str, DemoAccount]] = None,
    ):
        """
        Initialize the store.

        Args:
            auth_api: Client for the /auth endpoints
            users_api: Client for /users (profile updates)
            session: Persisted token/user and route state
            demo_accounts: Development accounts that log in locally.
                           None disables the shortcut entirely.
        """
        self._auth_api = auth_api
        self._users_api = users_api
        self._session = session
        self._demo_accounts = demo_accounts
        self._state = AuthState.UNKNOWN
        self._user: Optional[User] = None
        self._loading = True
        self._lock = asyncio.Lock()

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def is_authenticated(self) -> bool:
        return self._state is AuthState.AUTHENTICATED and self._session.has_token

    @property
    def demo_enabled(self) -> bool:
        return self._demo_accounts is not None

    def _set_authenticated(self, user: User, token: Optional[str] = None) -> None:
        if token is not None:
            self._session.persist(token, user.to_wire())
        else:
            self._session.save_user(user.to_wire())
        self._user = user
        self._state = AuthState.AUTHENTICATED

    def _set_anonymous(self) -> None:
        self._session.clear()
        self._user = None
        self._state = AuthState.ANONYMOUS

    def clear_auth(self) -> None:
        """Force-clear the session without calling the backend."""
        self._set_anonymous()
        logger.info("Authentication data cleared")

    def handle_session_invalidated(self) -> None:
        """Listener for the HTTP client's 401 handling."""
        self._user = None
        self._state = AuthState.ANONYMOUS

    async def check_auth_status(self) -> AuthState:
        """Verify a persisted token with the backend, if there is one."""
        async with self._lock:
            self._loading = True
            try:
                token = self._session.token
                if not token:
                    logger.debug("No persisted token, session is anonymous")
                    self._set_anonymous()
                    return self._state

                if self.demo_enabled and is_demo_token(token):
                    stored = self._session.get_user()
                    if stored:
                        self._restore_user(stored)
                        return self._state

                try:
                    response = await self._auth_api.get_profile()
                except FleetConsoleError as e:
                    logger.warning(f"Session check failed: {e.message}")
                    self._set_anonymous()
                    return self._state

                envelope = Envelope.model_validate(response)
                user_data = envelope.payload.get("user")
                if envelope.success and isinstance(user_data, dict):
                    self._restore_user(user_data)
                else:
                    logger.info("Persisted token rejected, clearing session")
                    self._set_anonymous()
                return self._state
            finally:
                self._loading = False

    def _restore_user(self, user_data: dict[str, Any]) -> None:
        try:
            user = User.model_validate(user_data)
        except PydanticValidationError:
            logger.warning("Profile payload is not a valid user, clearing session")
            self._set_anonymous()
            return
        self._set_authenticated(user)

    async def login(self, credentials: Union[LoginCredentials, dict[str, Any]]) -> AuthResult:
        try:
            creds = LoginCredentials.model_validate(credentials)
        except PydanticValidationError:
            return AuthResult(success=False, message="Email and password are required")
        async with self._lock:
            if self._demo_accounts is not None:
                account = match_demo_account(self._demo_accounts, creds.email, creds.password)
                if account is not None:
                    token = make_demo_token(account.role)
                    user = account.to_user()
                    self._set_authenticated(user, token)
                    logger.info(f"Demo login for role {account.role}")
                    return AuthResult(success=True, user=user, token=token)

            logger.debug(f"Logging in {creds.email}")
            try:
                response = await self._auth_api.login(creds.model_dump())
            except FleetConsoleError as e:
                logger.warning(f"Login failed: {e.message}")
                return AuthResult(success=False, message=e.message or "Login failed")

            envelope = Envelope.model_validate(response)
            token = envelope.payload.get("token")
            user_data = envelope.payload.get("user")
            if envelope.success and token and isinstance(user_data, dict):
                try:
                    user = User.model_validate(user_data)
                except PydanticValidationError:
                    return AuthResult(success=False, message="Login response has no valid user")
                self._set_authenticated(user, token)
                return AuthResult(success=True, user=user, token=token)

            return AuthResult(success=False, message=envelope.message or "Login failed")

    async def logout(self) -> None:
        async with self._lock:
            try:
                await self._auth_api.logout()
            except FleetConsoleError as e:
                logger.warning(f"Logout request failed, clearing session anyway: {e.message}")
            finally:
                self._set_anonymous()
                logger.info("Logged out, session cleared")

    async def register(self, user_data: dict[str, Any]) -> AuthResult:
        try:
            response = await self._auth_api.register(user_data)
        except FleetConsoleError as e:
            logger.warning(f"Registration failed: {e.message}")
            return AuthResult(
                success=False,
                message=e.message or "Registration failed. Please try again.",
            )

        envelope = Envelope.model_validate(response)
        if envelope.success:
            return AuthResult(success=True, message=envelope.message)
        return AuthResult(success=False, message=envelope.message or "Registration failed")

    async def update_profile(self, profile_data: dict[str, Any]) -> AuthResult:
        """Update the current user through PUT /users/{id}."""
        if self._user is None or self._user.id is None:
            return AuthResult(success=False, message="Not logged in")

        try:
            response = await self._users_api.update(self._user.id, profile_data)
        except FleetConsoleError as e:
            logger.warning(f"Profile update failed: {e.message}")
            return AuthResult(
                success=False,
                message=e.message or "Profile update failed. Please try again.",
            )

        envelope = Envelope.model_validate(response)
        if not envelope.success:
            return AuthResult(success=False, message=envelope.message or "Profile update failed")

        user_data = envelope.payload.get("user")
        if not isinstance(user_data, dict):
            user_data = {**self._user.to_wire(), **profile_data}
        try:
            user = User.model_validate(user_data)
        except PydanticValidationError:
            return AuthResult(success=False, message="Profile update returned an invalid user")

        # A 401 during the update may have ended the session meanwhile
        if self.is_authenticated:
            self._set_authenticated(user)
        return AuthResult(success=True, user=user, message=envelope.message)

    async def change_password(
        self, current_password: str, password: str, confirm_password: Optional[str] = None
    ) -> AuthResult:
        payload = {
            "currentPassword": current_password,
            "password": password,
            "confirmPassword": confirm_password if confirm_password is not None else password,
        }
        return await self._simple_call(
            self._auth_api.change_password(payload), "Password change failed"
        )

    async def forgot_password(self, email: str) -> AuthResult:
        return await self._simple_call(
            self._auth_api.forgot_password(email), "Password reset request failed"
        )

    async def reset_password(self, token: str, password: str) -> AuthResult:
        return await self._simple_call(
            self._auth_api.reset_password(token, password), "Password reset failed"
        )

    async def _simple_call(self, call, failure_message: str) -> AuthResult:
        try:
            response = await call
        except FleetConsoleError as e:
            return AuthResult(success=False, message=e.message or failure_message)
        envelope = Envelope.model_validate(response)
        if envelope.success:
            return AuthResult(success=True, message=envelope.message)
        return AuthResult(success=False, message=envelope.message or failure_message)
