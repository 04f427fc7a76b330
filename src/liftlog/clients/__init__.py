"""External platform clients."""

from .health import BaseHealthClient, HealthDataClient, HealthWorkoutRecord, NullHealthClient

__all__ = [
    "BaseHealthClient",
    "HealthDataClient",
    "HealthWorkoutRecord",
    "NullHealthClient",
]
