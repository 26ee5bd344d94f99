"""Tests for the single-request lifecycle wrapper."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from fleetconsole.modules.fetching import ApiCall


class TestExecute:
    @pytest.mark.asyncio
    async def test_success_updates_state(self):
        request = AsyncMock(return_value={"success": True, "data": {"count": 3}})
        on_success = MagicMock()
        call = ApiCall(request, on_success=on_success)

        result = await call.execute("arg", flag=True)

        assert result == {"success": True, "data": {"count": 3}}
        assert call.data == result
        assert call.loading is False
        assert call.error is None
        request.assert_awaited_once_with("arg", flag=True)
        on_success.assert_called_once_with(result)

    @pytest.mark.asyncio
    async def test_failure_records_and_reraises(self):
        """Errors should be stored and re-raised to the caller."""
        error = RuntimeError("boom")
        on_error = MagicMock()
        call = ApiCall(AsyncMock(side_effect=error), on_error=on_error, initial_data=[])

        with pytest.raises(RuntimeError):
            await call.execute()

        assert call.error is error
        assert call.loading is False
        assert call.data == []
        on_error.assert_called_once_with(error)

    @pytest.mark.asyncio
    async def test_new_execution_clears_error(self):
        request = AsyncMock(side_effect=[RuntimeError("boom"), {"ok": True}])
        call = ApiCall(request)

        with pytest.raises(RuntimeError):
            await call.execute()
        await call.refetch()

        assert call.error is None
        assert call.data == {"ok": True}


class TestOverlappingExecutions:
    @pytest.mark.asyncio
    async def test_latest_issued_wins(self):
        """A slow older response must not overwrite a newer one."""
        release_first = asyncio.Event()

        async def request(label):
            if label == "first":
                await release_first.wait()
            return label

        call = ApiCall(request)
        first = asyncio.create_task(call.execute("first"))
        await asyncio.sleep(0)

        assert await call.execute("second") == "second"
        release_first.set()

        assert await first == "first"
        assert call.data == "second"
        assert call.loading is False

    @pytest.mark.asyncio
    async def test_stale_error_is_not_recorded(self):
        release_first = asyncio.Event()

        async def request(label):
            if label == "first":
                await release_first.wait()
                raise RuntimeError("stale failure")
            return label

        call = ApiCall(request)
        first = asyncio.create_task(call.execute("first"))
        await asyncio.sleep(0)
        await call.execute("second")
        release_first.set()

        with pytest.raises(RuntimeError):
            await first
        assert call.error is None
        assert call.data == "second"


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_start_runs_when_immediate(self):
        request = AsyncMock(return_value=1)
        call = ApiCall(request)

        await call.start()

        assert call.data == 1
        request.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_start_skipped_when_not_immediate(self):
        request = AsyncMock(return_value=1)
        call = ApiCall(request, immediate=False)

        await call.start()

        request.assert_not_awaited()
        assert call.data is None

    @pytest.mark.asyncio
    async def test_start_failure_is_kept_in_error(self):
        """The initial run should not raise; the error is kept for display."""
        call = ApiCall(AsyncMock(side_effect=RuntimeError("down")))

        await call.start()

        assert isinstance(call.error, RuntimeError)

    @pytest.mark.asyncio
    async def test_dependency_change_reruns(self):
        request = AsyncMock(return_value=1)
        call = ApiCall(request, dependencies=("active",))

        assert await call.set_dependencies("active") is False
        request.assert_not_awaited()

        assert await call.set_dependencies("inactive") is True
        request.assert_awaited_once()
        assert call.dependencies == ("inactive",)

    @pytest.mark.asyncio
    async def test_reset_discards_in_flight(self):
        release = asyncio.Event()

        async def request():
            await release.wait()
            return "late"

        call = ApiCall(request, initial_data="initial")
        task = asyncio.create_task(call.execute())
        await asyncio.sleep(0)
        call.reset()
        release.set()
        await task

        assert call.data == "initial"
        assert call.loading is False

    @pytest.mark.asyncio
    async def test_dispose_stops_updates(self):
        on_success = MagicMock()
        call = ApiCall(AsyncMock(return_value="value"), on_success=on_success)
        call.dispose()

        assert await call.execute() == "value"
        assert call.data is None
        on_success.assert_not_called()
