"""
Authentication module.

Owns the client session: startup check, login, logout, registration and
profile updates.

Public API:
- IAuthStore: Interface for session operations
- AuthStore: Implementation backed by the fleet API
- AuthState, AuthResult, LoginCredentials, DemoAccount: Models
- DEMO_ACCOUNTS: Development-mode accounts
- Auth exceptions: NotAuthenticatedError
"""

from .interfaces import IAuthStore
from .models import AuthState, AuthResult, LoginCredentials, DemoAccount
from .demo import DEMO_ACCOUNTS, is_demo_token, make_demo_token
from .service import AuthStore
from .exceptions import NotAuthenticatedError

__all__ = [
    # Interface
    "IAuthStore",
    # Implementation
    "AuthStore",
    # Models
    "AuthState",
    "AuthResult",
    "LoginCredentials",
    "DemoAccount",
    # Demo accounts
    "DEMO_ACCOUNTS",
    "is_demo_token",
    "make_demo_token",
    # Exceptions
    "NotAuthenticatedError",
]
