"""FastAPI dependency providers backed by the DI container."""

from app.container import container
from app.repositories.common import CacheRepository
from app.services.geo import GeoCdnService, GeoCdnSyncCron, GeoService


def get_geo_service() -> GeoService:
    return container.geo


def get_cdn_service() -> GeoCdnService:
    return container.geo_cdn


def get_sync_cron() -> GeoCdnSyncCron:
    return container.geo_sync


def get_cache() -> CacheRepository:
    return container.cache
