"""Static role -> permission table."""

from typing import Optional

ROLE_PERMISSIONS: dict[str, frozenset[str]] = {
    "admin": frozenset({
        "user_management",
        "vehicle_management",
        "reporting",
        "settings",
        "view_all_requests",
        "approve_requests",
        "manage_warehouse",
    }),
    "user": frozenset({
        "request_vehicle",
        "request_equipment",
        "request_maintenance",
        "view_own_requests",
    }),
    "warehouse": frozenset({
        "track_vehicles",
        "track_equipment",
        "manage_schedules",
        "update_status",
        "view_requests",
    }),
}

ROLE_NAMES: dict[str, str] = {
    "admin": "Administrator",
    "user": "User",
    "warehouse": "Warehouse Manager",
}


def permissions_for(role: Optional[str]) -> frozenset[str]:
    """Permissions granted to ``role``; unknown or missing roles get none."""
    if not role:
        return frozenset()
    return ROLE_PERMISSIONS.get(role, frozenset())
