"""
Record sources.

This module implements the IRecordSource interface with three
implementations:
- LiveSource: Reads the backend through the resource clients
- DemoSource: Serves the built-in sample records
- FallbackSource: Tries the backend first, falls back to samples when
  the server can't be reached
"""

import copy
import logging
from typing import Any, Optional

from fleetconsole.modules.fetching.envelope import extract_page
from fleetconsole.modules.http.exceptions import NetworkError
from fleetconsole.modules.resources.registry import FleetResources
from fleetconsole.shared.models import Pagination

from .exceptions import NoDemoDataError, UnknownSourceError
from .fixtures import DEMO_RECORDS
from .interfaces import IRecordSource
from .models import RecordPage

logger = logging.getLogger(__name__)

DEMO_NOTICE = "Unable to connect to server. Showing demo data."


class LiveSource:
    """Record source backed by the fleet API."""

    def __init__(self, resources: FleetResources):
        self._resources = resources

    async def list_records(
        self, resource: str, params: Optional[dict[str, Any]] = None
    ) -> RecordPage:
        response = await self._resources.get(resource).get_all(params or {})
        page = extract_page(response)
        if page is None:
            return RecordPage()
        return RecordPage(records=page.records, pagination=page.pagination)


class DemoSource:
    """
    Record source using injected sample data.

    Only the ``status`` filter is honored; samples are small enough that
    everything fits on one page.
    """

    def __init__(self, records: Optional[dict[str, list[dict[str, Any]]]] = None):
        self._records = records if records is not None else DEMO_RECORDS

    async def list_records(
        self, resource: str, params: Optional[dict[str, Any]] = None
    ) -> RecordPage:
        if resource not in self._records:
            raise NoDemoDataError(resource)

        records = copy.deepcopy(self._records[resource])
        status = (params or {}).get("status")
        if status and status != "all":
            records = [r for r in records if r.get("status") == status]

        pagination = Pagination(
            current_page=1,
            total_pages=1 if records else 0,
            total_items=len(records),
            limit=max(len(records), 1),
        )
        return RecordPage(records=records, pagination=pagination, is_demo=True)


class FallbackSource:
    """
    Live source with demo fallback.

    A NetworkError (no response at all) switches to the samples and sets
    the notice banner. API errors such as 401 or 400 still propagate.
    """

    def __init__(self, live: IRecordSource, demo: IRecordSource):
        self._live = live
        self._demo = demo

    async def list_records(
        self, resource: str, params: Optional[dict[str, Any]] = None
    ) -> RecordPage:
        try:
            return await self._live.list_records(resource, params)
        except NetworkError as e:
            logger.warning(f"Backend unreachable for {resource}, serving demo data: {e.reason}")
            page = await self._demo.list_records(resource, params)
            return page.model_copy(update={"notice": DEMO_NOTICE})


def build_record_source(mode: str, resources: FleetResources) -> IRecordSource:
    """
    Pick the record source for the configured mode.

    Args:
        mode: "live", "demo" or "fallback" (settings.data_source)
        resources: Resource clients for the live source

    Raises:
        UnknownSourceError: For any other mode
    """
    if mode == "live":
        return LiveSource(resources)
    if mode == "demo":
        return DemoSource()
    if mode == "fallback":
        return FallbackSource(LiveSource(resources), DemoSource())
    raise UnknownSourceError(mode)
