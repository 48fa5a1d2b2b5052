"""Admin geo API views - cache, CDN and targeting operations."""

from fastapi import APIRouter, Depends

from app.repositories.common import CacheRepository
from app.services.geo import GeoCdnService, GeoCdnSyncCron, GeoService
from web.api.deps import get_cache, get_cdn_service, get_geo_service, get_sync_cron
from web.api.errors import validate_county
from web.api.geo.views import json_response, respond

from .schemas import CacheClearRequest, CacheStats, CdnNodeResponse

router = APIRouter(prefix="/api/admin/geo", tags=["admin"])

ADMIN_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@router.get("/cache/stats", response_model=CacheStats)
def cache_stats(cache: CacheRepository = Depends(get_cache)):
    return json_response(CacheStats(**cache.get_stats()).model_dump(), ADMIN_HEADERS)


@router.post("/cache/clear")
def cache_clear(body: CacheClearRequest | None = None, cache: CacheRepository = Depends(get_cache)):
    pattern = body.pattern if body else None
    cleared = cache.clear(pattern)
    return json_response({"success": True, "pattern": pattern, "cleared": cleared}, ADMIN_HEADERS)


@router.post("/cdn/sync")
async def cdn_sync(cron: GeoCdnSyncCron = Depends(get_sync_cron)):
    return await respond(cron.sync_now(), ADMIN_HEADERS, "Failed to sync geo data to CDN")


@router.get("/cdn/status")
def cdn_status(cron: GeoCdnSyncCron = Depends(get_sync_cron)):
    return json_response({"success": True, **cron.status()}, ADMIN_HEADERS)


@router.get("/cdn/data")
async def cdn_data(cdn: GeoCdnService = Depends(get_cdn_service)):
    return await respond(cdn.get_geo_data(), ADMIN_HEADERS, "Failed to fetch geo data")


@router.get("/cdn/node", response_model=CdnNodeResponse)
def cdn_node(county: str, town: str | None = None, cdn: GeoCdnService = Depends(get_cdn_service)):
    county = validate_county(county)
    return json_response(CdnNodeResponse(**cdn.get_nearest_cdn_node(county, town)).model_dump(), ADMIN_HEADERS)


@router.get("/targeting")
async def targeting(county: str, town: str | None = None, geo: GeoService = Depends(get_geo_service)):
    county = validate_county(county)
    return await respond(geo.get_ad_targeting_data(county, town), ADMIN_HEADERS, "Failed to get targeting data")


@router.get("/active")
async def active_locations(geo: GeoService = Depends(get_geo_service)):
    return await respond(geo.get_active_locations(), ADMIN_HEADERS, "Failed to get active locations")


@router.get("/cities")
async def city_stats(geo: GeoService = Depends(get_geo_service)):
    return await respond(geo.get_city_stats(), ADMIN_HEADERS, "Failed to get city stats")
