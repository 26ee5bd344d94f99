"""
Single-request lifecycle wrapper.

Tracks ``data``/``loading``/``error`` for one request function so front
ends don't repeat the bookkeeping. Overlapping executions are allowed and
never cancelled; each execution takes a sequence number and only the most
recently issued one may write state, so a slow stale response can't
overwrite a newer one.
"""

import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

logger = logging.getLogger(__name__)

RequestFn = Callable[..., Awaitable[Any]]
SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[Exception], None]


class ApiCall:
    def __init__(
        self,
        request_fn: RequestFn,
        dependencies: Sequence[Any] = (),
        immediate: bool = True,
        on_success: Optional[SuccessCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        initial_data: Any = None,
    ):
        """
        Args:
            request_fn: Coroutine function issuing the request
            dependencies: Values that trigger a re-run when they change
            immediate: Run once on ``start()`` and on every dependency change
            on_success: Called with the result of the latest execution
            on_error: Called with the error of the latest execution
            initial_data: Value of ``data`` before the first result and after reset
        """
        self._request_fn = request_fn
        self.dependencies = tuple(dependencies)
        self.immediate = immediate
        self._on_success = on_success
        self._on_error = on_error
        self.initial_data = initial_data

        self.data: Any = initial_data
        self.loading = False
        self.error: Optional[Exception] = None

        self._sequence = 0
        self._disposed = False

    def _is_current(self, sequence: int) -> bool:
        return not self._disposed and sequence == self._sequence

    async def execute(self, *args: Any, **kwargs: Any) -> Any:
        """
        Run the request and record its outcome.

        The result (or error) is always returned (or raised) to this
        caller; state is only updated if no newer execution started since.
        """
        self._sequence += 1
        sequence = self._sequence
        self.loading = True
        self.error = None
        try:
            result = await self._request_fn(*args, **kwargs)
        except Exception as e:
            if self._is_current(sequence):
                self.error = e
                if self._on_error:
                    self._on_error(e)
            raise
        finally:
            if self._is_current(sequence):
                self.loading = False

        if self._is_current(sequence):
            self.data = result
            if self._on_success:
                self._on_success(result)
        else:
            logger.debug(f"Discarding stale result of execution {sequence}")
        return result

    async def refetch(self, *args: Any, **kwargs: Any) -> Any:
        return await self.execute(*args, **kwargs)

    async def _run_immediate(self) -> None:
        try:
            await self.execute()
        except Exception as e:
            # Already recorded in self.error for the front end to render
            logger.debug(f"Immediate execution failed: {e!r}")

    async def start(self) -> None:
        """Perform the initial execution when ``immediate`` is set."""
        if self.immediate:
            await self._run_immediate()

    async def set_dependencies(self, *dependencies: Any) -> bool:
        """
        Replace the dependency values; re-run when they changed.

        Returns:
            True if the dependencies changed
        """
        if tuple(dependencies) == self.dependencies:
            return False
        self.dependencies = tuple(dependencies)
        if self.immediate:
            await self._run_immediate()
        return True

    def reset(self) -> None:
        """Back to initial state; in-flight results are discarded."""
        self._sequence += 1
        self.data = self.initial_data
        self.error = None
        self.loading = False

    def dispose(self) -> None:
        """Stop applying results, e.g. when the owning view goes away."""
        self._disposed = True
        self.loading = False
