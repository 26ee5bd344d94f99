"""
End-to-end tests for the composition root.

A FastAPI app stands in for the fleet backend; requests reach it
in-process through httpx.ASGITransport.
"""

import httpx
import pytest
import pytest_asyncio

from fleetconsole.app import FleetConsole, build_storage, create_console
from fleetconsole.modules.auth import AuthState, NotAuthenticatedError
from fleetconsole.modules.datasource import DEMO_NOTICE, DemoSource, FallbackSource, LiveSource
from fleetconsole.modules.http import SessionExpiredError
from fleetconsole.shared.session import TOKEN_KEY
from fleetconsole.shared.storage import FileStorage, MemoryStorage


@pytest_asyncio.fixture
async def console(settings, storage, backend_transport):
    """Console wired to the fake backend."""
    app = create_console(settings, storage=storage, transport=backend_transport)
    yield app
    await app.aclose()


class TestBuildStorage:
    def test_memory(self, settings):
        assert isinstance(build_storage(settings), MemoryStorage)

    def test_file(self, settings, tmp_path):
        storage = build_storage(settings.model_copy(update={"storage_backend": "file"}))
        assert isinstance(storage, FileStorage)
        assert storage.path == tmp_path / "session.json"


class TestWiring:
    @pytest.mark.asyncio
    async def test_record_source_follows_settings(self, settings):
        for mode, cls in (("live", LiveSource), ("demo", DemoSource), ("fallback", FallbackSource)):
            async with FleetConsole(settings.model_copy(update={"data_source": mode})) as app:
                assert isinstance(app.records, cls)

    @pytest.mark.asyncio
    async def test_demo_accounts_follow_settings(self, settings):
        async with FleetConsole(settings) as app:
            assert app.auth.demo_enabled is False
        async with FleetConsole(settings.model_copy(update={"enable_demo_accounts": True})) as app:
            assert app.auth.demo_enabled is True

    @pytest.mark.asyncio
    async def test_consoles_do_not_share_sessions(self, settings):
        async with FleetConsole(settings) as first, FleetConsole(settings) as second:
            first.session.save_token("abc")
            assert second.session.token is None


class TestSessionLifecycle:
    @pytest.mark.asyncio
    async def test_starts_anonymous(self, console):
        assert await console.start() is AuthState.ANONYMOUS
        with pytest.raises(NotAuthenticatedError):
            console.require_user()
        assert console.roles.permissions == frozenset()

    @pytest.mark.asyncio
    async def test_login_then_restore(self, console, storage, settings, backend_transport, backend_account):
        """A session persisted by one console should be restored by the next."""
        await console.start()
        result = await console.auth.login(
            {"email": backend_account["email"], "password": backend_account["password"]}
        )

        assert result.success is True
        assert storage.get_item(TOKEN_KEY) == backend_account["token"]
        assert console.require_user().email == backend_account["email"]
        assert console.roles.is_admin() is True

        async with create_console(settings, storage=storage, transport=backend_transport) as again:
            assert await again.start() is AuthState.AUTHENTICATED
            assert again.auth.user.first_name == "Dana"
            assert again.auth.user.model_extra["department"] == "operations"

    @pytest.mark.asyncio
    async def test_bad_credentials(self, console):
        result = await console.auth.login({"email": "nobody@fleet.com", "password": "x"})

        assert result.success is False
        assert result.message == "Invalid email or password"
        assert console.auth.state is AuthState.ANONYMOUS

    @pytest.mark.asyncio
    async def test_expired_token_at_startup(self, console, storage):
        """A token the backend rejects should be cleared on startup."""
        storage.set_item(TOKEN_KEY, "expired")

        assert await console.start() is AuthState.ANONYMOUS
        assert storage.get_item(TOKEN_KEY) is None
        assert console.session.navigator.at_login is True

    @pytest.mark.asyncio
    async def test_revoked_token_mid_session(self, console, storage, backend_account):
        """A 401 on any request should end the session everywhere."""
        await console.auth.login(
            {"email": backend_account["email"], "password": backend_account["password"]}
        )
        storage.set_item(TOKEN_KEY, "revoked")

        with pytest.raises(SessionExpiredError):
            await console.records.list_records("vehicles")

        assert console.auth.is_authenticated is False
        assert console.auth.user is None
        assert console.auth.state is AuthState.ANONYMOUS
        assert console.session.get_user() is None
        assert console.session.navigator.at_login is True

    @pytest.mark.asyncio
    async def test_logout(self, console, fake_backend, backend_account):
        await console.auth.login(
            {"email": backend_account["email"], "password": backend_account["password"]}
        )

        await console.auth.logout()

        assert fake_backend.state.logout_calls == 1
        assert console.session.has_token is False
        assert console.auth.is_authenticated is False


class TestRecords:
    @pytest_asyncio.fixture
    async def logged_in(self, console, backend_account):
        await console.auth.login(
            {"email": backend_account["email"], "password": backend_account["password"]}
        )
        return console

    @pytest.mark.asyncio
    async def test_list_records(self, logged_in):
        page = await logged_in.records.list_records("vehicles", {"limit": 10, "search": None})

        assert len(page.records) == 10
        assert page.pagination.total_items == 25
        assert page.pagination.total_pages == 3
        assert page.pagination.has_next_page is True

    @pytest.mark.asyncio
    async def test_paginate_vehicles(self, logged_in):
        pager = logged_in.paginate("vehicles", {"limit": 10})

        await pager.start()
        assert pager.data[0]["plateNumber"] == "VH-001"

        await pager.next_page()
        await pager.next_page()
        assert pager.pagination.current_page == 3
        assert len(pager.data) == 5

        assert await pager.next_page() is None
        assert pager.pagination.current_page == 3

    @pytest.mark.asyncio
    async def test_paginate_drivers(self, logged_in):
        """The same pager should handle a differently keyed envelope."""
        pager = logged_in.paginate("drivers")

        await pager.start()

        assert pager.resource_key == "drivers"
        assert [d["employeeId"] for d in pager.data] == ["EMP001", "EMP002"]
        assert await pager.prev_page() is None

    @pytest.mark.asyncio
    async def test_dashboard(self, logged_in):
        overview = await logged_in.resources.dashboard.get_overview()
        assert overview["data"]["vehicles"]["total"] == 25


class TestDemoMode:
    @pytest.mark.asyncio
    async def test_demo_login_sends_nothing(self, settings, storage, mock_transport, recorded_requests):
        """Demo logins must not reach the backend at all."""
        transport = mock_transport(lambda request: httpx.Response(500))
        demo_settings = settings.model_copy(update={"enable_demo_accounts": True})

        async with create_console(demo_settings, storage=storage, transport=transport) as app:
            result = await app.auth.login({"email": "user@fleet.com", "password": "user123"})

            assert result.success is True
            assert app.roles.has_permission("request_vehicle") is True
            assert app.roles.role_name == "User"

        async with create_console(demo_settings, storage=storage, transport=transport) as app:
            assert await app.start() is AuthState.AUTHENTICATED

        assert recorded_requests == []

    @pytest.mark.asyncio
    async def test_fallback_when_unreachable(self, settings, mock_transport):
        def unreachable(request):
            raise httpx.ConnectError("Connection refused", request=request)

        fallback = settings.model_copy(update={"data_source": "fallback"})
        async with create_console(fallback, transport=mock_transport(unreachable)) as app:
            page = await app.records.list_records("vehicles", {"status": "active"})

        assert page.is_demo is True
        assert page.notice == DEMO_NOTICE
        assert {v["status"] for v in page.records} == {"active"}
