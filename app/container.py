"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.repositories.common.cache import CacheRepository
from app.repositories.db import close_db
from app.repositories.geo.location import LocationRepository
from app.services.geo.cdn import GeoCdnService
from app.services.geo.stats import GeoService
from app.services.geo.sync import GeoCdnSyncCron
from cdn_client import CdnClient, R2Storage


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        conn: duckdb.DuckDBPyConnection | None = None,
        storage: R2Storage | None = None,
        cdn_client: CdnClient | None = None,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons); one cache shared by every service
        self._owns_db = conn is None
        self._location_repo = LocationRepository(conn)
        self._cache_repo = CacheRepository()

        # External clients
        self._storage = storage or R2Storage()
        self._cdn_client = cdn_client or CdnClient()

        # Services (with injected repos)
        self.geo = GeoService(
            location_repo=self._location_repo,
            cache_repo=self._cache_repo,
        )

        self.geo_cdn = GeoCdnService(
            location_repo=self._location_repo,
            cache_repo=self._cache_repo,
            storage=self._storage,
            cdn_client=self._cdn_client,
        )

        self.geo_sync = GeoCdnSyncCron(cdn_service=self.geo_cdn)

        self._initialized = True

    @property
    def cache(self) -> CacheRepository:
        return self._cache_repo

    async def dispose(self) -> None:
        """Stop background work and release connections."""
        if not self._initialized:
            return

        self.geo_sync.stop()
        await self._cdn_client.aclose()
        if self._owns_db:
            close_db()
        self._initialized = False


# Global container instance
container = Container()
