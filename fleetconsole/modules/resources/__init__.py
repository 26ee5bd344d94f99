"""
Resource client modules.

One client per REST resource, each a direct mapping to backend routes.

Public API:
- FleetResources: Builds every client over one ApiClient
- ResourceClient: CRUD + stats base class
- AuthApi, DashboardApi, UsersApi, VehiclesApi, DriversApi, TripsApi,
  FuelApi, MaintenanceApi, AlertsApi
"""

from .alerts import AlertsApi
from .auth import AuthApi
from .base import ResourceClient, RecordId, record_id
from .dashboard import DashboardApi
from .drivers import DriversApi
from .exceptions import UnknownResourceError
from .fuel import FuelApi
from .maintenance import MaintenanceApi
from .registry import FleetResources
from .trips import TripsApi
from .users import UsersApi
from .vehicles import VehiclesApi

__all__ = [
    "FleetResources",
    "ResourceClient",
    "RecordId",
    "record_id",
    "UnknownResourceError",
    "AuthApi",
    "DashboardApi",
    "UsersApi",
    "VehiclesApi",
    "DriversApi",
    "TripsApi",
    "FuelApi",
    "MaintenanceApi",
    "AlertsApi",
]
