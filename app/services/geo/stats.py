"""Geo stats service - aggregate queries memoized in the shared cache."""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import date, timedelta

from loguru import logger

from app.models.geo import GeoCategory
from app.repositories.common import CacheRepository
from app.repositories.geo import LocationRepository
from app.repositories.geo.location import ago, utcnow

UNKNOWN = "Unknown"

# Cache keys share the "geo-" prefix so writes can invalidate them together.
STATS_KEY = "geo-stats-all"
TODAY_KEY = "geo-today"
ACTIVE_KEY = "geo-active-locations"
CITY_KEY = "geo-city-stats"
COUNTY_KEY = "geo-county-{}"
TRENDS_KEY = "geo-trends-{}"
INVALIDATE_PATTERN = "geo-"

# TTLs (seconds), paired with the Cache-Control headers of web.api.geo
STATS_TTL = 180
COUNTY_TTL = 300
TODAY_TTL = 300
TRENDS_TTL = 600
ACTIVE_TTL = 60
CITY_TTL = 300


class GeoService:
    """Geo distribution stats with in-process caching.

    Public methods never raise: failures come back as
    ``{"success": False, "error": ...}``. Concurrent misses on the same key
    each hit the database (no request coalescing).
    """

    def __init__(self, location_repo: LocationRepository, cache_repo: CacheRepository):
        self._locations = location_repo
        self._cache = cache_repo
        logger.debug("GeoService initialized")

    async def _get_cached_or_fetch(
        self, key: str, ttl: float, fetch: Callable[[], Awaitable[dict]], what: str
    ) -> dict:
        """Try the cache first, fetch and store on miss."""
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: {}", key)
            return cached

        try:
            result = await fetch()
        except Exception as e:
            logger.error("Error getting {}: {}", what, e)
            return {"success": False, "error": str(e)}

        self._cache.set(key, result, ttl)
        return result

    def invalidate(self) -> int:
        """Drop every cached geo aggregate."""
        return self._cache.clear(INVALIDATE_PATTERN)

    # -- Reads -----------------------------------------------------------------

    async def get_geo_stats(self) -> dict:
        """Category rollups, top locations and live buckets."""

        async def fetch() -> dict:
            by_category, top_locations, active_now = await asyncio.gather(
                self._locations.get_category_stats(),
                self._locations.get_top_locations(20),
                self._locations.get_active_now(50),
            )
            return {
                "success": True,
                "by_category": by_category,
                "top_locations": top_locations,
                "active_now": active_now,
            }

        return await self._get_cached_or_fetch(STATS_KEY, STATS_TTL, fetch, "geo stats")

    async def get_county_details(self, county: str) -> dict:
        """Summary row and per-town breakdown for one county."""

        async def fetch() -> dict:
            summary, towns = await asyncio.gather(
                self._locations.get_county_summary(county),
                self._locations.get_county_towns(county),
            )
            return {"success": True, "county": county, "summary": summary, "towns": towns}

        return await self._get_cached_or_fetch(COUNTY_KEY.format(county), COUNTY_TTL, fetch, "county details")

    async def get_ad_targeting_data(self, county: str, town: str | None = None) -> dict:
        """Real-time counters for ad targeting; never cached."""
        try:
            rows = await self._locations.get_targeting(county, town)
        except Exception as e:
            logger.error("Error getting ad targeting data: {}", e)
            return {"success": False, "error": str(e)}
        return {"success": True, "targeting": rows}

    async def get_geo_trends(self, days: int = 7) -> dict:
        """Archived daily totals per category over the last `days` days."""

        async def fetch() -> dict:
            since = utcnow().date() - timedelta(days=days)
            trends = await self._locations.get_trends(since)
            return {"success": True, "days": days, "trends": trends}

        return await self._get_cached_or_fetch(TRENDS_KEY.format(days), TRENDS_TTL, fetch, "geo trends")

    async def get_todays_stats(self) -> dict:
        async def fetch() -> dict:
            by_category = await self._locations.get_todays_stats()
            return {
                "success": True,
                "by_category": by_category,
                "active_today": sum(r["active_today"] or 0 for r in by_category),
                "active_now": sum(r["active_now"] or 0 for r in by_category),
            }

        return await self._get_cached_or_fetch(TODAY_KEY, TODAY_TTL, fetch, "today stats")

    async def get_active_locations(self) -> dict:
        async def fetch() -> dict:
            locations = await self._locations.get_active_now(100)
            return {
                "success": True,
                "locations": locations,
                "total": sum(r["active_now"] or 0 for r in locations),
            }

        return await self._get_cached_or_fetch(ACTIVE_KEY, ACTIVE_TTL, fetch, "active locations")

    async def get_city_stats(self) -> dict:
        async def fetch() -> dict:
            cities = await self._locations.get_city_stats(50)
            return {"success": True, "cities": cities, "total_cities": len(cities)}

        return await self._get_cached_or_fetch(CITY_KEY, CITY_TTL, fetch, "city stats")

    async def warm_cache(self) -> int:
        """Preload live buckets under `geo-location:{location_id}`."""
        result = await self.get_active_locations()
        locations = [{**r, "id": r["location_id"]} for r in result.get("locations", [])]
        self._cache.warmup(locations, "geo-location", self._cache.ttl_for("geo"))
        logger.info("Geo cache warmed with {} locations", len(locations))
        return len(locations)

    # -- Writes ----------------------------------------------------------------

    async def register_device(
        self,
        device_id: str,
        county: str | None = None,
        town: str | None = None,
        category: str | None = None,
    ) -> dict:
        """Record a device sighting in its location bucket."""
        county = county or UNKNOWN
        town = town or UNKNOWN
        category = category or GeoCategory.UNKNOWN.value
        try:
            is_new = await self._locations.register_device(device_id, county, town, category)
        except Exception as e:
            logger.error("Error registering device: {}", e)
            return {"success": False, "error": str(e)}

        self.invalidate()
        return {
            "success": True,
            "registered": is_new,
            "location": {"county": county, "town": town, "category": category},
        }

    async def track_location(self, county: str | None, town: str | None, category: str | None) -> dict:
        county = county or UNKNOWN
        town = town or UNKNOWN
        category = category or GeoCategory.UNKNOWN.value
        try:
            await self._locations.track_location(county, town, category)
        except Exception as e:
            logger.error("Error tracking location: {}", e)
            return {"success": False, "error": str(e)}

        self.invalidate()
        return {"success": True, "tracked": {"county": county, "town": town, "category": category}}

    async def cleanup_old_devices(self, days: int = 30, idle_minutes: int = 15) -> dict:
        """Forget stale devices and clear live counters of idle buckets."""
        try:
            deleted = await self._locations.delete_devices_before(ago(days=days))
            deactivated = await self._locations.deactivate_idle(ago(minutes=idle_minutes))
        except Exception as e:
            logger.error("Error cleaning up devices: {}", e)
            return {"success": False, "error": str(e)}

        self.invalidate()
        logger.info("Cleaned up {} devices, deactivated {} locations", deleted, deactivated)
        return {"success": True, "deleted": deleted, "deactivated": deactivated}

    async def archive_daily_stats(self, day: date | None = None) -> dict:
        day = day or utcnow().date()
        try:
            archived = await self._locations.archive_daily(day)
        except Exception as e:
            logger.error("Error archiving daily stats: {}", e)
            return {"success": False, "error": str(e)}

        self.invalidate()
        return {"success": True, "date": day.isoformat(), "archived": archived}

    async def reset_daily_counts(self) -> dict:
        try:
            reset = await self._locations.reset_daily()
        except Exception as e:
            logger.error("Error resetting daily counts: {}", e)
            return {"success": False, "error": str(e)}

        self.invalidate()
        logger.info("Reset daily counters of {} locations", reset)
        return {"success": True, "reset": reset}
