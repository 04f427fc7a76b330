"""Health-data platform clients.

Completed workouts are forwarded to a health platform on a best-effort basis.
No concrete platform bridge ships with liftlog; ``NullHealthClient`` is used
when none is configured.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable

from loguru import logger

STRENGTH_TRAINING = "traditional_strength_training"


@dataclass
class HealthWorkoutRecord:
    """A finished workout as written to a health platform."""

    start: datetime
    end: datetime
    calories: float
    activity: str = STRENGTH_TRAINING

    @property
    def duration_minutes(self) -> float:
        return (self.end - self.start).total_seconds() / 60


@runtime_checkable
class HealthDataClient(Protocol):
    """Protocol for health-data platform clients."""

    async def initialize(self) -> bool:
        """Request access to the platform.

        Returns:
            True when the platform is available and access was granted
        """
        ...

    async def save_workout(self, start: datetime, end: datetime, calories: float) -> bool:
        """Record a finished workout.

        Returns:
            True when the platform accepted the workout
        """
        ...


class BaseHealthClient(ABC):
    """Base class for health clients with cached initialization.

    ``initialize()`` only talks to the platform until it succeeds once; later
    calls return the cached result.
    """

    def __init__(self):
        self._initialized = False

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Return the name of the health platform."""
        pass

    @abstractmethod
    async def _request_access(self) -> bool:
        """Ask the platform for read/write access."""
        pass

    @abstractmethod
    async def _write_workout(self, record: HealthWorkoutRecord) -> bool:
        """Write one workout record to the platform."""
        pass

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> bool:
        if self._initialized:
            return True

        self._initialized = await self._request_access()
        if self._initialized:
            logger.info(f"{self.platform_name} initialized")
        else:
            logger.debug(f"{self.platform_name} not available")
        return self._initialized

    async def save_workout(self, start: datetime, end: datetime, calories: float) -> bool:
        if not await self.initialize():
            return False

        record = HealthWorkoutRecord(start=start, end=end, calories=calories)
        saved = await self._write_workout(record)
        if saved:
            logger.info(
                f"Saved {record.duration_minutes:.0f} min workout to {self.platform_name}"
            )
        return saved


class NullHealthClient(BaseHealthClient):
    """Client for environments without a health platform."""

    @property
    def platform_name(self) -> str:
        return "none"

    async def _request_access(self) -> bool:
        return False

    async def _write_workout(self, record: HealthWorkoutRecord) -> bool:
        return False
