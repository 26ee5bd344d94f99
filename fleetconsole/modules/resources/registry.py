"""One place that builds every resource client over a shared ApiClient."""

from fleetconsole.modules.http.interfaces import IApiClient

from .alerts import AlertsApi
from .auth import AuthApi
from .base import ResourceClient
from .dashboard import DashboardApi
from .drivers import DriversApi
from .fuel import FuelApi
from .maintenance import MaintenanceApi
from .trips import TripsApi
from .users import UsersApi
from .vehicles import VehiclesApi
from .exceptions import UnknownResourceError


class FleetResources:
    """All resource clients bound to one API client."""

    def __init__(self, api: IApiClient):
        self.auth = AuthApi(api)
        self.dashboard = DashboardApi(api)
        self.users = UsersApi(api)
        self.vehicles = VehiclesApi(api)
        self.drivers = DriversApi(api)
        self.trips = TripsApi(api)
        self.fuel = FuelApi(api)
        self.maintenance = MaintenanceApi(api)
        self.alerts = AlertsApi(api)

    @property
    def collections(self) -> dict[str, ResourceClient]:
        """CRUD collections keyed by their path segment."""
        clients = (
            self.users,
            self.vehicles,
            self.drivers,
            self.trips,
            self.fuel,
            self.maintenance,
            self.alerts,
        )
        return {c.resource: c for c in clients}

    def get(self, name: str) -> ResourceClient:
        try:
            return self.collections[name]
        except KeyError:
            raise UnknownResourceError(name, list(self.collections))
