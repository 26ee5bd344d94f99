"""
Paginated request wrapper.

Wraps a list request function taking a params dict and keeps the current
page of records plus the pagination block. Navigation past either end is
a no-op that issues no request.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from fleetconsole.shared.models import Pagination

from .envelope import extract_page

logger = logging.getLogger(__name__)

ListRequestFn = Callable[[dict[str, Any]], Awaitable[Any]]


class PaginatedApiCall:
    def __init__(self, request_fn: ListRequestFn, initial_params: Optional[dict[str, Any]] = None):
        self._request_fn = request_fn
        self.params: dict[str, Any] = dict(initial_params or {})
        self.data: list[Any] = []
        self.pagination = Pagination()
        self.resource_key: Optional[str] = None
        self.loading = False
        self.error: Optional[Exception] = None
        self._sequence = 0

    async def fetch_data(self, new_params: Optional[dict[str, Any]] = None) -> Any:
        """
        Fetch with ``params`` overlaid by ``new_params``.

        ``new_params`` apply to this request only; use ``update_params`` to
        change the standing filters.
        """
        self._sequence += 1
        sequence = self._sequence
        merged = {**self.params, **(new_params or {})}
        self.loading = True
        self.error = None
        try:
            result = await self._request_fn(merged)
            page = extract_page(result)
        except Exception as e:
            if sequence == self._sequence:
                self.error = e
            raise
        finally:
            if sequence == self._sequence:
                self.loading = False

        if sequence != self._sequence:
            logger.debug(f"Discarding stale page from request {sequence}")
        elif page is not None:
            self.data = page.records
            self.pagination = page.pagination
            self.resource_key = page.resource_key
        return result

    async def start(self) -> None:
        """Initial fetch; a failure is left in ``error``."""
        try:
            await self.fetch_data()
        except Exception as e:
            logger.debug(f"Initial page fetch failed: {e!r}")

    def update_params(self, new_params: dict[str, Any]) -> None:
        """Merge into the standing params; takes effect on the next fetch."""
        self.params = {**self.params, **new_params}

    async def next_page(self) -> Optional[Any]:
        if not self.pagination.has_next_page:
            return None
        return await self.fetch_data({"page": self.pagination.current_page + 1})

    async def prev_page(self) -> Optional[Any]:
        if not self.pagination.has_prev_page:
            return None
        return await self.fetch_data({"page": self.pagination.current_page - 1})

    async def go_to_page(self, page: int) -> Any:
        return await self.fetch_data({"page": page})

    async def refetch(self) -> Any:
        """Re-fetch the page currently shown with the standing params."""
        return await self.fetch_data({"page": self.pagination.current_page})
