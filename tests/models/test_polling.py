"""Unit tests for PollingHandle.

Short intervals keep these fast; assertions only rely on lower bounds of
tick counts so they do not depend on scheduler timing.
"""

import asyncio

import pytest

from models.polling import PollingHandle


class TestPollingHandleInit:
    def test_rejects_non_positive_interval(self) -> None:
        async def noop() -> None:
            pass

        with pytest.raises(ValueError):
            PollingHandle("1", noop, interval=0)

    def test_not_running_until_started(self) -> None:
        async def noop() -> None:
            pass

        handle = PollingHandle("1", noop, interval=1.0)
        assert not handle.is_running
        assert handle.ticks == 0

    def test_start_requires_running_loop(self) -> None:
        async def noop() -> None:
            pass

        with pytest.raises(RuntimeError):
            PollingHandle("1", noop, interval=1.0).start()


class TestPollingHandleLifecycle:
    async def test_ticks_repeatedly(self) -> None:
        calls = []

        async def tick() -> None:
            calls.append(1)

        handle = PollingHandle("1", tick, interval=0.01)
        handle.start()
        await asyncio.sleep(0.1)
        handle.cancel()

        assert len(calls) >= 2
        assert handle.ticks == len(calls)

    async def test_first_tick_after_one_interval(self) -> None:
        calls = []

        async def tick() -> None:
            calls.append(1)

        handle = PollingHandle("1", tick, interval=10.0)
        handle.start()
        await asyncio.sleep(0)

        assert calls == []
        assert handle.is_running
        handle.cancel()

    async def test_cancel_stops_callbacks(self) -> None:
        calls = []

        async def tick() -> None:
            calls.append(1)

        handle = PollingHandle("1", tick, interval=0.01)
        handle.start()
        await asyncio.sleep(0.05)
        handle.cancel()
        seen = len(calls)
        await asyncio.sleep(0.05)

        assert not handle.is_running
        assert len(calls) == seen

    async def test_cancel_is_idempotent(self) -> None:
        async def noop() -> None:
            pass

        handle = PollingHandle("1", noop, interval=0.01)
        handle.cancel()
        handle.start()
        handle.cancel()
        handle.cancel()
        assert not handle.is_running

    async def test_double_start_rejected(self) -> None:
        async def noop() -> None:
            pass

        handle = PollingHandle("1", noop, interval=1.0)
        handle.start()
        with pytest.raises(RuntimeError):
            handle.start()
        handle.cancel()

    async def test_callback_errors_do_not_stop_the_loop(self) -> None:
        async def failing() -> None:
            raise RuntimeError("boom")

        handle = PollingHandle("1", failing, interval=0.01)
        handle.start()
        await asyncio.sleep(0.1)

        assert handle.is_running
        assert handle.ticks >= 2
        handle.cancel()
