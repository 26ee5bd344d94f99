"""
Form-submission wrapper.

Like ApiCall but never runs on its own and exposes a ``success`` flag
that clears itself after a short delay so confirmation banners fade.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from fleetconsole.shared.config import get_settings

logger = logging.getLogger(__name__)


class ApiSubmit:
    def __init__(
        self,
        request_fn: Callable[..., Awaitable[Any]],
        on_success: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
        reset_on_success: bool = True,
        success_reset_delay: Optional[float] = None,
    ):
        self._request_fn = request_fn
        self._on_success = on_success
        self._on_error = on_error
        self.reset_on_success = reset_on_success
        self.success_reset_delay = (
            success_reset_delay
            if success_reset_delay is not None
            else get_settings().submit_success_reset_seconds
        )
        self.loading = False
        self.error: Optional[Exception] = None
        self.success = False
        self._reset_handle: Optional[asyncio.TimerHandle] = None

    def _cancel_pending_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _clear_success(self) -> None:
        self.success = False
        self._reset_handle = None

    async def submit(self, *args: Any, **kwargs: Any) -> Any:
        self._cancel_pending_reset()
        self.loading = True
        self.error = None
        self.success = False
        try:
            result = await self._request_fn(*args, **kwargs)
        except Exception as e:
            self.error = e
            if self._on_error:
                self._on_error(e)
            raise
        finally:
            self.loading = False

        self.success = True
        if self._on_success:
            self._on_success(result)
        if self.reset_on_success:
            loop = asyncio.get_running_loop()
            self._reset_handle = loop.call_later(self.success_reset_delay, self._clear_success)
        return result

    def reset(self) -> None:
        self._cancel_pending_reset()
        self.error = None
        self.success = False
        self.loading = False
