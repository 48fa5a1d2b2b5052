"""Shared fixtures - in-memory duckdb, fake clock, fake object storage."""

import pytest

from app.repositories.common import CacheRepository
from app.repositories.db import connect
from app.repositories.geo import LocationRepository
from cdn_client import UploadFile, UploadResult


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingLocationRepository(LocationRepository):
    """Counts datastore round trips."""

    def __init__(self, conn):
        super().__init__(conn)
        self.queries = 0

    async def query(self, query, params=None):
        self.queries += 1
        return await super().query(query, params)


class FakeStorage:
    """Stands in for R2Storage; records uploads."""

    def __init__(self, enabled: bool = True, public_url: str = "https://cdn.example.com"):
        self.enabled = enabled
        self.public_url = public_url
        self.uploads: list[tuple[UploadFile, str, bool]] = []
        self.fail_with: Exception | None = None

    def is_enabled(self) -> bool:
        return self.enabled

    def get_public_url(self, file_name: str) -> str | None:
        if not self.enabled or not self.public_url:
            return None
        return f"{self.public_url}/{file_name}"

    async def upload_file(self, file: UploadFile, folder: str = "uploads", timestamped: bool = True) -> UploadResult:
        if self.fail_with is not None:
            raise self.fail_with
        self.uploads.append((file, folder, timestamped))
        key = f"{folder}/{file.originalname}"
        return UploadResult(file_name=key, url=self.get_public_url(key), size=file.size, mime_type=file.mimetype)


def seed(conn, rows: list[tuple]) -> None:
    """Insert (category, county, town, total_registered, active_today, active_now) buckets."""
    for category, county, town, total, today, now in rows:
        conn.execute(
            """
            INSERT INTO active_location_counts
                (category, county, town, total_registered, active_today, active_now, last_activity)
            VALUES (?, ?, ?, ?, ?, ?, now()::TIMESTAMP)
            """,
            [category, county, town, total, today, now],
        )


SAMPLE_ROWS = [
    ("KENYA", "NAIROBI", "Westlands", 10, 5, 2),
    ("KENYA", "NAIROBI", "Karen", 4, 1, 0),
    ("KENYA", "MOMBASA", "Nyali", 6, 3, 1),
    ("EAST_AFRICA", "EAST_AFRICA", "Kampala", 3, 0, 0),
    ("GLOBAL", "GLOBAL", "Unknown", 0, 0, 0),
]


@pytest.fixture
def conn():
    db = connect(":memory:")
    yield db
    db.close()


@pytest.fixture
def seeded(conn):
    seed(conn, SAMPLE_ROWS)
    return conn


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return CacheRepository(timer=clock)


@pytest.fixture
def repo(conn):
    return CountingLocationRepository(conn)


@pytest.fixture
def storage():
    return FakeStorage()
