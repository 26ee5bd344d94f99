"""
Shared data models used across modules.

The backend speaks camelCase JSON; these models accept either the wire
alias or the Python field name and dump back to the wire form.
"""

from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    The logged-in user as cached by the console.

    Only the fields the console reads are declared. Everything else the
    backend sends is kept as extra data and persisted untouched.
    """

    id: Union[int, str, None] = Field(None, description="User ID")
    email: str = Field(..., description="User's email address")
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    role: Optional[str] = Field(None, description="admin, user or warehouse")

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
    )

    @property
    def full_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) or self.email

    def to_wire(self) -> dict[str, Any]:
        """Dump to the camelCase shape the backend and storage use."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Pagination(BaseModel):
    """Pagination block of a list envelope."""

    current_page: int = Field(1, alias="currentPage")
    total_pages: int = Field(0, alias="totalPages")
    total_items: int = Field(0, alias="totalItems")
    has_next_page: bool = Field(False, alias="hasNextPage")
    has_prev_page: bool = Field(False, alias="hasPrevPage")
    limit: int = 10

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Envelope(BaseModel):
    """
    Top-level response envelope produced by the fleet API.

    ``data`` stays a plain dict: resource records are opaque to the console.
    """

    success: bool = False
    message: Optional[str] = None
    data: Any = None

    model_config = ConfigDict(extra="allow")

    @property
    def payload(self) -> dict[str, Any]:
        """``data`` when it is an object, else an empty dict."""
        return self.data if isinstance(self.data, dict) else {}
