"""Tests for GeoService - cached aggregates and counter writes."""

import asyncio
from datetime import date

from app.repositories.geo import LocationRepository
from app.services.geo import GeoService
from app.services.geo.stats import STATS_KEY


class BrokenRepository(LocationRepository):
    async def query(self, query, params=None):
        raise RuntimeError("db down")

    async def run(self, fn):
        raise RuntimeError("db down")


def bucket(conn, county, town):
    return conn.execute(
        "SELECT total_registered, active_today, active_now FROM active_location_counts WHERE county = ? AND town = ?",
        [county, town],
    ).fetchone()


class TestGeoStats:
    def test_second_call_served_from_cache(self, seeded, repo, cache):
        geo = GeoService(repo, cache)
        first = asyncio.run(geo.get_geo_stats())
        assert repo.queries == 3
        second = asyncio.run(geo.get_geo_stats())
        assert repo.queries == 3
        assert second == first
        assert cache.get_stats()["hits"] >= 1

    def test_shape(self, seeded, repo, cache):
        result = asyncio.run(GeoService(repo, cache).get_geo_stats())
        assert result["success"] is True
        assert [r["category"] for r in result["by_category"]] == ["KENYA", "EAST_AFRICA", "GLOBAL"]
        kenya = result["by_category"][0]
        assert kenya["total_devices"] == 20
        assert kenya["total_counties"] == 2
        assert kenya["total_towns"] == 3
        assert result["top_locations"][0]["county"] == "NAIROBI"
        assert result["top_locations"][0]["total_devices"] == 14
        assert [r["town"] for r in result["active_now"]] == ["Westlands", "Nyali"]

    def test_unknown_towns_not_counted(self, seeded, repo, cache):
        result = asyncio.run(GeoService(repo, cache).get_geo_stats())
        global_row = next(r for r in result["by_category"] if r["category"] == "GLOBAL")
        assert global_row["total_towns"] == 0

    def test_expired_entry_refetched(self, seeded, repo, cache, clock):
        geo = GeoService(repo, cache)
        asyncio.run(geo.get_geo_stats())
        clock.advance(180)
        asyncio.run(geo.get_geo_stats())
        assert repo.queries == 6

    def test_concurrent_misses_each_query(self, seeded, repo, cache):
        geo = GeoService(repo, cache)

        async def both():
            return await asyncio.gather(geo.get_geo_stats(), geo.get_geo_stats())

        a, b = asyncio.run(both())
        assert a == b
        assert repo.queries == 6

    def test_failure_returns_error_and_is_not_cached(self, conn, cache):
        geo = GeoService(BrokenRepository(conn), cache)
        result = asyncio.run(geo.get_geo_stats())
        assert result == {"success": False, "error": "db down"}
        assert cache.get(STATS_KEY) is None


class TestOtherReads:
    def test_county_details(self, seeded, repo, cache):
        result = asyncio.run(GeoService(repo, cache).get_county_details("NAIROBI"))
        assert result["summary"]["total_devices"] == 14
        assert result["summary"]["unique_towns"] == 2
        assert [t["town"] for t in result["towns"]] == ["Westlands", "Karen"]
        assert cache.get("geo-county-NAIROBI") == result

    def test_targeting_uncached(self, seeded, repo, cache):
        geo = GeoService(repo, cache)
        asyncio.run(geo.get_ad_targeting_data("NAIROBI"))
        result = asyncio.run(geo.get_ad_targeting_data("NAIROBI", "Karen"))
        assert repo.queries == 2
        assert [r["town"] for r in result["targeting"]] == ["Karen"]

    def test_targeting_orders_by_active_now(self, seeded, repo, cache):
        result = asyncio.run(GeoService(repo, cache).get_ad_targeting_data("NAIROBI"))
        assert [r["town"] for r in result["targeting"]] == ["Westlands", "Karen"]

    def test_todays_stats_totals(self, seeded, repo, cache):
        result = asyncio.run(GeoService(repo, cache).get_todays_stats())
        assert result["active_today"] == 9
        assert result["active_now"] == 3

    def test_active_locations(self, seeded, repo, cache):
        result = asyncio.run(GeoService(repo, cache).get_active_locations())
        assert result["total"] == 3
        assert len(result["locations"]) == 2

    def test_city_stats(self, seeded, repo, cache):
        result = asyncio.run(GeoService(repo, cache).get_city_stats())
        assert result["cities"][0]["city"] == "Westlands"
        assert result["total_cities"] == 5

    def test_warm_cache(self, seeded, repo, cache):
        warmed = asyncio.run(GeoService(repo, cache).warm_cache())
        assert warmed == 2
        keys = sorted(k for k in cache._entries if k.startswith("geo-location:"))
        assert keys == ["geo-location:1", "geo-location:3"]
        assert cache.get("geo-location:1")["town"] == "Westlands"


class TestWrites:
    def test_register_new_then_repeat(self, conn, repo, cache):
        geo = GeoService(repo, cache)
        first = asyncio.run(geo.register_device("dev-1", "NAIROBI", "Karen", "KENYA"))
        second = asyncio.run(geo.register_device("dev-1", "NAIROBI", "Karen", "KENYA"))
        assert first["registered"] is True
        assert second["registered"] is False
        assert bucket(conn, "NAIROBI", "Karen") == (1, 2, 2)

    def test_register_defaults(self, conn, repo, cache):
        result = asyncio.run(GeoService(repo, cache).register_device("dev-2"))
        assert result["location"] == {"county": "Unknown", "town": "Unknown", "category": "UNKNOWN"}
        assert bucket(conn, "Unknown", "Unknown") == (1, 1, 1)

    def test_write_invalidates_geo_keys(self, seeded, repo, cache):
        geo = GeoService(repo, cache)
        asyncio.run(geo.get_geo_stats())
        cache.set("articles-1", "keep")
        asyncio.run(geo.track_location("NAIROBI", "Westlands", "KENYA"))
        assert cache.get(STATS_KEY) is None
        assert cache.get("articles-1") == "keep"
        result = asyncio.run(geo.get_geo_stats())
        assert result["active_now"][0]["active_now"] == 3

    def test_track_does_not_register(self, conn, repo, cache):
        asyncio.run(GeoService(repo, cache).track_location("KISUMU", "Kondele", "KENYA"))
        assert bucket(conn, "KISUMU", "Kondele") == (0, 1, 1)

    def test_cleanup(self, conn, repo, cache):
        geo = GeoService(repo, cache)
        asyncio.run(geo.register_device("old", "NAIROBI", "Karen", "KENYA"))
        asyncio.run(geo.register_device("new", "NAIROBI", "Karen", "KENYA"))
        conn.execute("UPDATE geo_device SET last_seen = TIMESTAMP '2000-01-01' WHERE device_id = 'old'")
        conn.execute("UPDATE active_location_counts SET last_activity = TIMESTAMP '2000-01-01'")
        result = asyncio.run(geo.cleanup_old_devices())
        assert result == {"success": True, "deleted": 1, "deactivated": 1}
        assert bucket(conn, "NAIROBI", "Karen")[2] == 0

    def test_reset_daily(self, seeded, repo, cache):
        result = asyncio.run(GeoService(repo, cache).reset_daily_counts())
        assert result["reset"] == 3
        assert bucket(seeded, "NAIROBI", "Westlands") == (10, 0, 0)

    def test_archive_and_trends(self, seeded, repo, cache):
        geo = GeoService(repo, cache)
        archived = asyncio.run(geo.archive_daily_stats())
        assert archived["success"] is True
        assert archived["archived"] == 5
        again = asyncio.run(geo.archive_daily_stats(date.fromisoformat(archived["date"])))
        assert again["archived"] == 5

        trends = asyncio.run(geo.get_geo_trends(7))
        kenya = next(t for t in trends["trends"] if t["category"] == "KENYA")
        assert kenya["total_devices"] == 20
        assert kenya["counties"] == 2
        assert trends["days"] == 7

    def test_write_failure(self, conn, cache):
        result = asyncio.run(GeoService(BrokenRepository(conn), cache).reset_daily_counts())
        assert result == {"success": False, "error": "db down"}
