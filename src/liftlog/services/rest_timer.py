"""Rest timer with a wall-clock deadline.

The countdown ticks once per second while the process is running, but the
deadline (``end_time``) is the source of truth: ``sync_with_clock()``
recomputes the remaining seconds from it whenever ticking may have been
suspended, for example after the host comes back to the foreground.
"""

import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from ..models.settings import DEFAULT_REST_TIMER_SECONDS
from .scheduler import AsyncioScheduler, ScheduledTask, Scheduler

TICK_SECONDS = 1.0


@dataclass
class RestTimerState:
    is_running: bool = False
    seconds_remaining: int = 0
    total_seconds: int = DEFAULT_REST_TIMER_SECONDS
    end_time: float | None = None  # epoch seconds

    def to_dict(self) -> dict:
        return {
            "is_running": self.is_running,
            "seconds_remaining": self.seconds_remaining,
            "total_seconds": self.total_seconds,
            "end_time": self.end_time,
        }


class RestTimer:
    """Countdown between sets.

    Args:
        default_seconds: Duration used when ``start()`` gets none
        clock: Returns the current time in epoch seconds
        on_complete: Called once each time a countdown reaches zero
        scheduler: Schedules the one-second ticks
    """

    def __init__(
        self,
        default_seconds: int = DEFAULT_REST_TIMER_SECONDS,
        clock: Callable[[], float] = time.time,
        on_complete: Callable[[], None] | None = None,
        scheduler: Scheduler | None = None,
    ):
        self.default_seconds = default_seconds
        self.clock = clock
        self.on_complete = on_complete
        self.scheduler = scheduler or AsyncioScheduler()
        self.state = RestTimerState(total_seconds=default_seconds)

        # Bumped on every start/stop/sync so ticks from an earlier run are ignored
        self._generation = 0
        self._pending: ScheduledTask | None = None

    @property
    def is_running(self) -> bool:
        return self.state.is_running

    def start(self, seconds: int | None = None) -> RestTimerState:
        """Start a new countdown, replacing any running one."""
        duration = seconds or self.default_seconds
        self._cancel_pending()
        self._generation += 1

        self.state = RestTimerState(
            is_running=True,
            seconds_remaining=duration,
            total_seconds=duration,
            end_time=self.clock() + duration,
        )
        self._schedule_tick(TICK_SECONDS)
        logger.debug(f"Rest timer started for {duration}s")
        return self.state

    def tick(self) -> RestTimerState:
        """Advance the countdown by one second."""
        if not self.state.is_running:
            return self.state

        self.state.seconds_remaining = max(0, self.state.seconds_remaining - 1)
        if self.state.seconds_remaining == 0:
            self._complete()
        return self.state

    def sync_with_clock(self) -> RestTimerState:
        """Recompute the remaining time from the deadline.

        Any pending tick is replaced. When the deadline has passed the timer
        completes immediately.
        """
        if not self.state.is_running or self.state.end_time is None:
            return self.state

        self._cancel_pending()
        self._generation += 1

        remaining = self.state.end_time - self.clock()
        self.state.seconds_remaining = max(0, math.ceil(remaining))
        if self.state.seconds_remaining == 0:
            self._complete()
        else:
            # Next tick lands on the next whole second before the deadline
            self._schedule_tick(remaining - (self.state.seconds_remaining - 1))
        return self.state

    def stop(self) -> RestTimerState:
        """Stop the countdown, keeping the remaining seconds."""
        self._cancel_pending()
        self._generation += 1
        self.state.is_running = False
        self.state.end_time = None
        return self.state

    def reset(self) -> RestTimerState:
        """Stop the countdown and restore the full duration."""
        self.stop()
        self.state.seconds_remaining = self.state.total_seconds
        return self.state

    def _schedule_tick(self, delay: float) -> None:
        self._pending = self.scheduler.call_later(delay, self._on_tick, self._generation)

    def _on_tick(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._pending = None
        self.tick()
        if self.state.is_running:
            self._schedule_tick(TICK_SECONDS)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _complete(self) -> None:
        self._cancel_pending()
        self._generation += 1
        self.state.is_running = False
        self.state.seconds_remaining = 0
        self.state.end_time = None
        logger.debug("Rest timer complete")

        if self.on_complete is not None:
            try:
                self.on_complete()
            except Exception as e:
                logger.warning(f"Rest timer completion callback failed: {e}")
