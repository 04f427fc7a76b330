"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from liftlog.db import Storage, init_db, seed_database
from liftlog.services.rest_timer import RestTimer
from liftlog.services.scheduler import ScheduledTask
from liftlog.services.workout_session import WorkoutSessionManager


class FakeClock:
    """Epoch-seconds clock that only moves when told to."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StepClock:
    """Datetime clock that moves forward a fixed step on every read."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=30)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


class FakeScheduler:
    """Collects scheduled callbacks so tests can fire them by hand."""

    def __init__(self):
        self.tasks: list[tuple[float, ScheduledTask]] = []

    def call_later(self, delay, callback, *args) -> ScheduledTask:
        task = ScheduledTask(callback, *args)
        self.tasks.append((delay, task))
        return task

    @property
    def pending(self) -> list[ScheduledTask]:
        return [task for _, task in self.tasks if task.pending]

    def run_pending(self) -> int:
        """Fire every task pending right now. Returns how many were fired."""
        due = self.pending
        for task in due:
            task.run()
        return len(due)


class FailingHealthClient:
    """Health client whose platform always errors."""

    def __init__(self):
        self.calls = 0

    async def initialize(self) -> bool:
        return True

    async def save_workout(self, start, end, calories) -> bool:
        self.calls += 1
        raise RuntimeError("health platform unavailable")


class RecordingHealthClient:
    def __init__(self):
        self.saved = []

    async def initialize(self) -> bool:
        return True

    async def save_workout(self, start, end, calories) -> bool:
        self.saved.append((start, end, calories))
        return True


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def storage(temp_db_path):
    """Storage over a fresh database with the built-in data loaded."""
    await init_db(temp_db_path)
    await seed_database(temp_db_path)
    return Storage(temp_db_path)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_scheduler():
    return FakeScheduler()


@pytest.fixture
def rest_timer(fake_clock, fake_scheduler):
    return RestTimer(default_seconds=90, clock=fake_clock, scheduler=fake_scheduler)


@pytest.fixture
def make_session(storage, rest_timer):
    """Factory for session managers with a deterministic clock and hand-driven timer."""

    def _make(health_client=None) -> WorkoutSessionManager:
        return WorkoutSessionManager(
            storage,
            health_client=health_client,
            rest_timer=rest_timer,
            clock=StepClock(datetime(2024, 3, 4, 18, 0)),
        )

    return _make


@pytest.fixture
def session(make_session):
    return make_session()


@pytest.fixture
def failing_health():
    return FailingHealthClient()


@pytest.fixture
def recording_health():
    return RecordingHealthClient()


SAMPLE_CSV = """exerciseName,date,repetitions,weightLb,weightKg,note,labelName
Dumbbell Chest Press,2024-01-01 18:05:00,10,50,22.7,,
Dumbbell Chest Press,2024-01-01 18:00:00,12,45,20.4,,
"Leg Press, Sled",2024-01-01 18:20:00,10,135,61.2,,
Zottman Curls,2024-01-03 07:30:00,8,25.25,11.5,,
Dumbbell Curls,2024-01-03 07:40:00,10.5,30,13.6,,
"""


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV
