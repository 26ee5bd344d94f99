"""
Role and permission module.

Public API:
- RoleStore: Permission checks for one role
- permissions_for: Pure role -> permission lookup
- ROLE_PERMISSIONS, ROLE_NAMES: Static tables
"""

from .permissions import ROLE_PERMISSIONS, ROLE_NAMES, permissions_for
from .service import RoleStore

__all__ = [
    "RoleStore",
    "permissions_for",
    "ROLE_PERMISSIONS",
    "ROLE_NAMES",
]
