"""Tests for the asyncio scheduler."""

import asyncio

from liftlog.services.scheduler import AsyncioScheduler, ScheduledTask


class TestScheduledTask:
    def test_runs_once(self):
        calls = []
        task = ScheduledTask(calls.append, "x")

        task.run()
        task.run()

        assert calls == ["x"]
        assert task.fired
        assert not task.pending

    def test_cancelled_never_runs(self):
        calls = []
        task = ScheduledTask(calls.append, "x")

        task.cancel()
        task.cancel()
        task.run()

        assert calls == []
        assert task.cancelled


class TestAsyncioScheduler:
    """Tests against a real event loop."""

    async def test_call_later(self):
        calls = []
        AsyncioScheduler().call_later(0.01, calls.append, 1)

        await asyncio.sleep(0.05)

        assert calls == [1]

    async def test_cancel_before_due(self):
        calls = []
        task = AsyncioScheduler().call_later(0.01, calls.append, 1)
        task.cancel()

        await asyncio.sleep(0.05)

        assert calls == []

    async def test_negative_delay_runs_soon(self):
        calls = []
        AsyncioScheduler().call_later(-5, calls.append, 1)

        await asyncio.sleep(0.01)

        assert calls == [1]
