"""
Auth module data models.

These models define the session state machine and the result shape the
store hands back to front ends.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from fleetconsole.shared.models import User


class AuthState(str, Enum):
    """Session lifecycle states."""

    UNKNOWN = "unknown"  # before the startup check completes
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class LoginCredentials(BaseModel):
    """Credentials posted to the login endpoint."""

    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Plain-text password")

    model_config = ConfigDict(extra="allow")


class AuthResult(BaseModel):
    """
    Outcome of a session operation.

    Failures are reported here instead of raised so front ends can render
    the message inline.
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="Message to show the user")
    user: Optional[User] = Field(None, description="User after the operation")
    token: Optional[str] = Field(None, description="Issued bearer token")


class DemoAccount(BaseModel):
    """A built-in development account that logs in without the backend."""

    id: str
    email: str
    password: str
    first_name: str
    last_name: str
    role: str

    model_config = {"frozen": True}

    def to_user(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            role=self.role,
        )
