"""
Composition root.

Wires settings, session persistence, the HTTP client, resource clients,
the auth store and the record source into one FleetConsole object.
"""

import logging
from typing import Any, Optional

import httpx

from fleetconsole.modules.auth import DEMO_ACCOUNTS, AuthState, AuthStore, NotAuthenticatedError
from fleetconsole.modules.datasource import IRecordSource, build_record_source
from fleetconsole.modules.fetching import PaginatedApiCall
from fleetconsole.modules.http import ApiClient
from fleetconsole.modules.resources import FleetResources
from fleetconsole.modules.roles import RoleStore
from fleetconsole.shared.config import Settings, get_settings
from fleetconsole.shared.models import User
from fleetconsole.shared.navigation import Navigator
from fleetconsole.shared.session import SessionContext
from fleetconsole.shared.storage import FileStorage, ISessionStorage, MemoryStorage

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> ISessionStorage:
    if settings.storage_backend == "memory":
        return MemoryStorage()
    return FileStorage(settings.session_file)


class FleetConsole:
    """
    Everything a front end needs, bound to one session.

    Usage:
        async with create_console() as console:
            await console.start()
            result = await console.auth.login({"email": ..., "password": ...})
            page = await console.records.list_records("vehicles")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        storage: Optional[ISessionStorage] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.session = SessionContext(
            storage if storage is not None else build_storage(self.settings),
            Navigator(login_route=self.settings.login_route),
        )
        self.api = ApiClient(
            self.session,
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout,
            transport=transport,
        )
        self.resources = FleetResources(self.api)
        self.auth = AuthStore(
            self.resources.auth,
            self.resources.users,
            self.session,
            demo_accounts=DEMO_ACCOUNTS if self.settings.enable_demo_accounts else None,
        )
        self.api.add_unauthorized_listener(self.auth.handle_session_invalidated)
        self.records: IRecordSource = build_record_source(self.settings.data_source, self.resources)

        if self.settings.enable_demo_accounts:
            logger.warning("Demo accounts are enabled; do not use this configuration in production")

    async def __aenter__(self) -> "FleetConsole":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.api.aclose()

    async def start(self) -> AuthState:
        """Resolve the persisted session; call once at startup."""
        return await self.auth.check_auth_status()

    @property
    def roles(self) -> RoleStore:
        return RoleStore.from_user(self.auth.user if self.auth.is_authenticated else None)

    def require_user(self) -> User:
        if not self.auth.is_authenticated or self.auth.user is None:
            raise NotAuthenticatedError()
        return self.auth.user

    def paginate(self, resource: str, params: Optional[dict[str, Any]] = None) -> PaginatedApiCall:
        """Paginated list helper over one resource collection."""
        return PaginatedApiCall(self.resources.get(resource).get_all, params)


def create_console(
    settings: Optional[Settings] = None,
    storage: Optional[ISessionStorage] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FleetConsole:
    return FleetConsole(settings=settings, storage=storage, transport=transport)
