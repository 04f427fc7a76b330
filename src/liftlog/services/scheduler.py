"""Cancellable delayed callbacks on the asyncio event loop."""

import asyncio
from collections.abc import Callable
from typing import Protocol


class ScheduledTask:
    """Handle for one delayed callback.

    Once ``cancel()`` has been called the callback never runs, even when the
    loop has already dequeued it for execution.
    """

    def __init__(self, callback: Callable[..., None], *args):
        self._callback = callback
        self._args = args
        self._handle: asyncio.TimerHandle | None = None
        self._cancelled = False
        self._fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._fired)

    def attach(self, handle: asyncio.TimerHandle) -> None:
        self._handle = handle

    def run(self) -> None:
        """Invoke the callback unless the task was cancelled or already ran."""
        if not self.pending:
            return
        self._fired = True
        self._callback(*self._args)

    def cancel(self) -> None:
        """Cancel the task. Safe to call any number of times."""
        if self._cancelled:
            return
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class Scheduler(Protocol):
    """Anything able to run a callback after a delay."""

    def call_later(self, delay: float, callback: Callable[..., None], *args) -> ScheduledTask:
        ...


class AsyncioScheduler:
    """Scheduler backed by the running event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[..., None], *args) -> ScheduledTask:
        loop = self._loop or asyncio.get_running_loop()
        task = ScheduledTask(callback, *args)
        task.attach(loop.call_later(max(0.0, delay), task.run))
        return task
