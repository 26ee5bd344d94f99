"""
Tests for the record sources.

The live source runs against a MockTransport-backed ApiClient so the
whole path from resource client to RecordPage is exercised.
"""

import httpx
import pytest

from fleetconsole.modules.datasource import (
    DEMO_NOTICE,
    DemoSource,
    FallbackSource,
    IRecordSource,
    LiveSource,
    NoDemoDataError,
    RecordPage,
    UnknownSourceError,
    build_record_source,
)
from fleetconsole.modules.datasource.fixtures import DEMO_RECORDS
from fleetconsole.modules.http import ApiClient, NetworkError, SessionExpiredError
from fleetconsole.modules.resources import FleetResources
from fleetconsole.shared.exceptions import ConfigurationError

BASE_URL = "http://fleet.test/api"

VEHICLE_PAGE = {
    "success": True,
    "data": {
        "vehicles": [{"id": 1, "plateNumber": "AB-123", "status": "active"}],
        "pagination": {
            "currentPage": 1,
            "totalPages": 4,
            "totalItems": 31,
            "hasNextPage": True,
            "hasPrevPage": False,
            "limit": 10,
        },
    },
}


@pytest.fixture
def make_resources(session, mock_transport):
    """FleetResources over an ApiClient answering with ``handler``."""
    def factory(handler):
        api = ApiClient(session, base_url=BASE_URL, transport=mock_transport(handler))
        return FleetResources(api)
    return factory


def unreachable(request):
    raise httpx.ConnectError("Connection refused", request=request)


class TestLiveSource:
    @pytest.mark.asyncio
    async def test_returns_page(self, make_resources, recorded_requests):
        source = LiveSource(make_resources(lambda r: httpx.Response(200, json=VEHICLE_PAGE)))

        page = await source.list_records("vehicles", {"page": 1, "status": None})

        assert page.records == [{"id": 1, "plateNumber": "AB-123", "status": "active"}]
        assert page.pagination.total_items == 31
        assert page.is_demo is False
        assert page.notice is None
        assert dict(recorded_requests[0].url.params) == {"page": "1"}

    @pytest.mark.asyncio
    async def test_empty_response(self, make_resources):
        source = LiveSource(make_resources(lambda r: httpx.Response(200, json={"success": True})))

        page = await source.list_records("trips")

        assert page == RecordPage()

    @pytest.mark.asyncio
    async def test_null_pagination_fields_tolerated(self, make_resources):
        body = {"success": True, "data": {"vehicles": [], "pagination": {"totalPages": None}}}
        source = LiveSource(make_resources(lambda r: httpx.Response(200, json=body)))

        page = await source.list_records("vehicles")

        assert page.records == []
        assert page.pagination.total_pages == 0

    @pytest.mark.asyncio
    async def test_network_error_propagates(self, make_resources):
        """The live source itself never substitutes demo data."""
        source = LiveSource(make_resources(unreachable))

        with pytest.raises(NetworkError):
            await source.list_records("vehicles")


class TestDemoSource:
    @pytest.mark.asyncio
    async def test_serves_samples(self):
        page = await DemoSource().list_records("fuel")

        assert len(page.records) == len(DEMO_RECORDS["fuel"])
        assert page.is_demo is True
        assert page.pagination.total_items == 3
        assert page.pagination.has_next_page is False

    @pytest.mark.asyncio
    async def test_status_filter(self):
        page = await DemoSource().list_records("vehicles", {"status": "maintenance"})

        assert [v["plateNumber"] for v in page.records] == ["FL-002"]
        assert page.pagination.total_items == 1

    @pytest.mark.asyncio
    async def test_status_all_keeps_everything(self):
        page = await DemoSource().list_records("drivers", {"status": "all"})
        assert len(page.records) == len(DEMO_RECORDS["drivers"])

    @pytest.mark.asyncio
    async def test_returns_copies(self):
        """Callers mutating records should not change the samples."""
        source = DemoSource()
        page = await source.list_records("vehicles")
        page.records[0]["status"] = "retired"

        again = await source.list_records("vehicles")
        assert again.records[0]["status"] == "active"

    @pytest.mark.asyncio
    async def test_injected_records(self):
        source = DemoSource({"alerts": [{"id": "a1", "status": "active"}]})

        page = await source.list_records("alerts")

        assert page.records == [{"id": "a1", "status": "active"}]

    @pytest.mark.asyncio
    async def test_unknown_resource(self):
        with pytest.raises(NoDemoDataError):
            await DemoSource().list_records("trips")


class TestFallbackSource:
    @pytest.mark.asyncio
    async def test_uses_live_when_reachable(self, make_resources):
        live = LiveSource(make_resources(lambda r: httpx.Response(200, json=VEHICLE_PAGE)))
        source = FallbackSource(live, DemoSource())

        page = await source.list_records("vehicles")

        assert page.is_demo is False
        assert page.records[0]["plateNumber"] == "AB-123"

    @pytest.mark.asyncio
    async def test_falls_back_on_network_error(self, make_resources):
        """An unreachable server should switch to samples with a notice."""
        source = FallbackSource(LiveSource(make_resources(unreachable)), DemoSource())

        page = await source.list_records("maintenance")

        assert page.is_demo is True
        assert page.notice == DEMO_NOTICE
        assert [r["_id"] for r in page.records] == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_api_errors_propagate(self, make_resources, session):
        """A 401 is not a connectivity problem and must not show demo data."""
        session.save_token("expired")
        resources = make_resources(
            lambda r: httpx.Response(401, json={"success": False, "message": "Token expired"})
        )
        source = FallbackSource(LiveSource(resources), DemoSource())

        with pytest.raises(SessionExpiredError):
            await source.list_records("vehicles")

        assert session.has_token is False


class TestBuildRecordSource:
    @pytest.mark.parametrize("mode, cls", [
        ("live", LiveSource),
        ("demo", DemoSource),
        ("fallback", FallbackSource),
    ])
    def test_modes(self, mode, cls, make_resources):
        source = build_record_source(mode, make_resources(unreachable))
        assert isinstance(source, cls)
        assert isinstance(source, IRecordSource)

    def test_unknown_mode(self, make_resources):
        with pytest.raises(UnknownSourceError) as exc_info:
            build_record_source("offline", make_resources(unreachable))

        assert isinstance(exc_info.value, ConfigurationError)
