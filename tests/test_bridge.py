"""Tests for the Go-style tuple bridge: goify, goify_sync, result_to_tuple."""

import asyncio

import pytest

from resultant import CapturedError, Err, Ok, goify, goify_sync
from resultant.bridge import result_to_tuple


class TestResultToTuple:
    def test_ok(self):
        assert result_to_tuple(Ok(1)) == (1, None)

    def test_err_keeps_error(self):
        error = ValueError("x")
        value, err = result_to_tuple(Err(error))
        assert value is None
        assert err is error


class TestGoify:
    """Tests for goify with sync and async operations."""

    def test_sync_success(self):
        assert goify(lambda: 42) == (42, None)

    def test_sync_failure(self):
        value, err = goify(lambda: 1 / 0)
        assert value is None
        assert err == CapturedError("division by zero")

    @pytest.mark.asyncio
    async def test_async_success(self):
        async def op() -> str:
            await asyncio.sleep(0)
            return "ok"

        assert await goify(op) == ("ok", None)

    @pytest.mark.asyncio
    async def test_async_failure(self):
        async def op() -> str:
            raise ValueError("x")

        value, err = await goify(op)
        assert value is None
        assert err == CapturedError("x")

    def test_capture_is_forwarded(self):
        def op():
            raise KeyError("k")

        with pytest.raises(KeyError):
            goify(op, capture=(ValueError,))


class TestGoifySync:
    """Tests for goify_sync."""

    def test_success(self):
        assert goify_sync(lambda: "v") == ("v", None)

    def test_failure(self):
        def op():
            raise ValueError("x")

        value, err = goify_sync(op)
        assert value is None
        assert err == CapturedError("x")
        assert isinstance(err.__cause__, ValueError)

    def test_uncaptured_propagates(self):
        def op():
            raise KeyError("k")

        with pytest.raises(KeyError):
            goify_sync(op, capture=(ValueError,))

    def test_awaitable_lands_unresolved(self, log_events):
        """An awaitable return value is not awaited and is logged as a warning."""

        async def op() -> int:
            return 1

        value, err = goify_sync(op)
        try:
            assert asyncio.iscoroutine(value)
            assert err is None
        finally:
            value.close()
        warnings = [e for e in log_events if e["event"] == "goify_sync_received_awaitable"]
        assert warnings
        assert warnings[-1]["level"] == "warning"
        assert warnings[-1]["value_type"] == "coroutine"
