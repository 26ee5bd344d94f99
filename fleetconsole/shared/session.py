"""
Explicit session context.

Every component that needs the bearer token or the cached user receives a
SessionContext instead of reading ambient global state, so two consoles in
one process never share a session.
"""

import json
import logging
from typing import Any, Optional

from .navigation import Navigator
from .storage import ISessionStorage, MemoryStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class SessionContext:
    """Persisted token/user pair plus the route state it drives."""

    def __init__(
        self,
        storage: Optional[ISessionStorage] = None,
        navigator: Optional[Navigator] = None,
    ):
        self.storage = storage if storage is not None else MemoryStorage()
        self.navigator = navigator or Navigator()

    @property
    def token(self) -> Optional[str]:
        return self.storage.get_item(TOKEN_KEY) or None

    @property
    def has_token(self) -> bool:
        return self.token is not None

    def get_user(self) -> Optional[dict[str, Any]]:
        """Read the persisted user, or None if absent or corrupt."""
        raw = self.storage.get_item(USER_KEY)
        if not raw:
            return None
        try:
            user = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding corrupt persisted user")
            return None
        return user if isinstance(user, dict) else None

    def save_token(self, token: str) -> None:
        self.storage.set_item(TOKEN_KEY, token)

    def save_user(self, user: dict[str, Any]) -> None:
        self.storage.set_item(USER_KEY, json.dumps(user))

    def persist(self, token: str, user: dict[str, Any]) -> None:
        self.save_token(token)
        self.save_user(user)

    def clear(self) -> None:
        """Remove both session keys."""
        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(USER_KEY)

    def invalidate(self) -> None:
        """Clear the session and force the login view."""
        self.clear()
        self.navigator.redirect_to_login()
