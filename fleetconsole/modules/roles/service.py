"""
Role/permission store.

Pure derivation from the user's role string. Roles do not inherit from
each other and there are no wildcard permissions.
"""

from typing import Optional

from fleetconsole.shared.models import User

from .permissions import ROLE_NAMES, permissions_for


class RoleStore:
    def __init__(self, role: Optional[str] = None):
        self.role = role or None
        self.permissions = permissions_for(self.role)

    @classmethod
    def from_user(cls, user: Optional[User]) -> "RoleStore":
        return cls(user.role if user is not None else None)

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    def is_admin(self) -> bool:
        return self.role == "admin"

    def is_user(self) -> bool:
        return self.role == "user"

    def is_warehouse(self) -> bool:
        return self.role == "warehouse"

    @property
    def role_name(self) -> str:
        return ROLE_NAMES.get(self.role or "", "Unknown")
