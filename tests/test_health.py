"""Tests for health platform clients."""

from datetime import datetime

from liftlog.clients.health import (
    BaseHealthClient,
    HealthDataClient,
    HealthWorkoutRecord,
    NullHealthClient,
)


class FakePlatformClient(BaseHealthClient):
    def __init__(self, grant: bool = True):
        super().__init__()
        self.grant = grant
        self.access_requests = 0
        self.records: list[HealthWorkoutRecord] = []

    @property
    def platform_name(self) -> str:
        return "Fake Health"

    async def _request_access(self) -> bool:
        self.access_requests += 1
        return self.grant

    async def _write_workout(self, record: HealthWorkoutRecord) -> bool:
        self.records.append(record)
        return True


START = datetime(2024, 3, 4, 18, 0)
END = datetime(2024, 3, 4, 19, 15)


class TestBaseHealthClient:
    async def test_initialize_cached(self):
        client = FakePlatformClient()
        assert await client.initialize()
        assert await client.initialize()
        assert client.access_requests == 1
        assert client.is_initialized

    async def test_save_workout(self):
        client = FakePlatformClient()

        assert await client.save_workout(START, END, calories=40)

        (record,) = client.records
        assert record.calories == 40
        assert record.duration_minutes == 75
        assert record.activity == "traditional_strength_training"

    async def test_access_denied(self):
        client = FakePlatformClient(grant=False)
        assert not await client.save_workout(START, END, calories=40)
        assert client.records == []


class TestNullHealthClient:
    async def test_never_saves(self):
        client = NullHealthClient()
        assert not await client.initialize()
        assert not await client.save_workout(START, END, calories=10)

    def test_satisfies_protocol(self):
        assert isinstance(NullHealthClient(), HealthDataClient)
