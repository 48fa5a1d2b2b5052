"""Location repository - aggregates over active_location_counts and devices."""

from datetime import date, datetime, timedelta, timezone

import duckdb
from loguru import logger

from app.repositories.base import BaseRepository, fetch_rows

_UPSERT_BUCKET = """
INSERT INTO active_location_counts (
    category, county, town, total_registered, active_today, active_now, last_activity
) VALUES (?, ?, ?, ?, 1, 1, ?)
ON CONFLICT (category, county, town) DO UPDATE SET
    total_registered = total_registered + EXCLUDED.total_registered,
    active_today = active_today + 1,
    active_now = active_now + 1,
    last_activity = EXCLUDED.last_activity
"""


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in TIMESTAMP columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def ago(**delta) -> datetime:
    """UTC timestamp `delta` in the past."""
    return utcnow() - timedelta(**delta)


class LocationRepository(BaseRepository):
    """Repository for geo location counters."""

    # -- Overall stats -----------------------------------------------------

    async def get_category_stats(self) -> list[dict]:
        """Per-category rollup ordered by total devices."""
        return await self.query(
            """
            SELECT
                category,
                COUNT(DISTINCT county) FILTER (WHERE county IS NOT NULL AND county != 'Unknown') AS total_counties,
                COUNT(DISTINCT town) FILTER (WHERE town IS NOT NULL AND town != 'Unknown') AS total_towns,
                SUM(total_registered) AS total_devices,
                SUM(active_today) AS active_today,
                SUM(active_now) AS active_now
            FROM active_location_counts
            GROUP BY category
            ORDER BY total_devices DESC
            """
        )

    async def get_top_locations(self, limit: int = 20) -> list[dict]:
        """Top (county, category) pairs by total devices."""
        return await self.query(
            """
            SELECT county, category,
                SUM(total_registered) AS total_devices,
                SUM(active_today) AS active_today,
                SUM(active_now) AS active_now
            FROM active_location_counts
            WHERE county IS NOT NULL AND county != 'Unknown'
            GROUP BY county, category
            ORDER BY total_devices DESC
            LIMIT ?
            """,
            [limit],
        )

    async def get_active_now(self, limit: int = 50) -> list[dict]:
        """Buckets with live visitors, busiest first."""
        return await self.query(
            """
            SELECT location_id, county, town, category, active_now, active_today, last_activity
            FROM active_location_counts
            WHERE active_now > 0
            ORDER BY active_now DESC
            LIMIT ?
            """,
            [limit],
        )

    async def get_todays_stats(self) -> list[dict]:
        """Per-category activity for the current day."""
        return await self.query(
            """
            SELECT
                category,
                SUM(active_today) AS active_today,
                SUM(active_now) AS active_now,
                COUNT(DISTINCT county) FILTER (WHERE active_today > 0) AS active_counties
            FROM active_location_counts
            GROUP BY category
            ORDER BY active_today DESC
            """
        )

    async def get_city_stats(self, limit: int = 50) -> list[dict]:
        """Towns ordered by registered devices."""
        return await self.query(
            """
            SELECT town AS city, county, category,
                total_registered AS unique_visitors,
                active_today AS total_visits,
                last_activity AS last_seen
            FROM active_location_counts
            WHERE town IS NOT NULL
            ORDER BY total_registered DESC
            LIMIT ?
            """,
            [limit],
        )

    # -- County / targeting --------------------------------------------------

    async def get_county_summary(self, county: str) -> dict | None:
        rows = await self.query(
            """
            SELECT
                SUM(total_registered) AS total_devices,
                SUM(active_today) AS active_today,
                SUM(active_now) AS active_now,
                COUNT(DISTINCT town) AS unique_towns
            FROM active_location_counts
            WHERE county = ?
            """,
            [county],
        )
        return rows[0] if rows else None

    async def get_county_towns(self, county: str) -> list[dict]:
        return await self.query(
            """
            SELECT town, total_registered, active_today, active_now, last_activity
            FROM active_location_counts
            WHERE county = ? AND town IS NOT NULL
            ORDER BY total_registered DESC
            """,
            [county],
        )

    async def get_targeting(self, county: str, town: str | None = None) -> list[dict]:
        """Live counters for a county, optionally narrowed to one town."""
        sql = """
            SELECT county, town, category, active_now, active_today, total_registered
            FROM active_location_counts
            WHERE county = ?
        """
        params = [county]
        if town is not None:
            sql += " AND town = ?"
            params.append(town)
        return await self.query(sql + " ORDER BY active_now DESC", params)

    # -- Snapshots / trends --------------------------------------------------

    async def get_snapshot_rows(self, limit: int = 1000) -> list[dict]:
        """Rows published to the CDN, most registered first."""
        return await self.query(
            """
            SELECT category, county, town, total_registered, active_today, active_now, last_activity
            FROM active_location_counts
            WHERE total_registered > 0
            ORDER BY total_registered DESC
            LIMIT ?
            """,
            [limit],
        )

    async def get_trends(self, since: date) -> list[dict]:
        return await self.query(
            """
            SELECT
                stat_date,
                category,
                SUM(total_registered) AS total_devices,
                SUM(active_today) AS active_devices,
                COUNT(DISTINCT county) AS counties
            FROM geo_daily_stats
            WHERE stat_date >= ?
            GROUP BY stat_date, category
            ORDER BY stat_date, category
            """,
            [since],
        )

    # -- Writes ----------------------------------------------------------------

    async def register_device(self, device_id: str, county: str, town: str, category: str) -> bool:
        """Record a device sighting. Returns True for a first sighting."""

        def write(cursor: duckdb.DuckDBPyConnection) -> bool:
            now = utcnow()
            existing = fetch_rows(cursor, "SELECT device_id FROM geo_device WHERE device_id = ?", [device_id])
            if existing:
                cursor.execute(
                    """
                    UPDATE geo_device SET category = ?, county = ?, town = ?, last_seen = ?
                    WHERE device_id = ?
                    """,
                    [category, county, town, now, device_id],
                )
            else:
                cursor.execute(
                    """
                    INSERT INTO geo_device (device_id, category, county, town, first_seen, last_seen)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    [device_id, category, county, town, now, now],
                )
            cursor.execute(_UPSERT_BUCKET, [category, county, town, 0 if existing else 1, now])
            return not existing

        is_new = await self.run(write)
        logger.debug("register_device({}): new={}", device_id, is_new)
        return is_new

    async def track_location(self, county: str, town: str, category: str) -> None:
        """Bump activity counters of a bucket."""
        await self.run(lambda cursor: cursor.execute(_UPSERT_BUCKET, [category, county, town, 0, utcnow()]))

    async def delete_devices_before(self, cutoff: datetime) -> int:
        rows = await self.run(
            lambda cursor: fetch_rows(
                cursor, "DELETE FROM geo_device WHERE last_seen < ? RETURNING device_id", [cutoff]
            )
        )
        return len(rows)

    async def deactivate_idle(self, cutoff: datetime) -> int:
        """Zero active_now of buckets without activity since `cutoff`."""
        rows = await self.run(
            lambda cursor: fetch_rows(
                cursor,
                """
                UPDATE active_location_counts SET active_now = 0
                WHERE active_now > 0 AND (last_activity IS NULL OR last_activity < ?)
                RETURNING location_id
                """,
                [cutoff],
            )
        )
        return len(rows)

    async def reset_daily(self) -> int:
        rows = await self.run(
            lambda cursor: fetch_rows(
                cursor,
                """
                UPDATE active_location_counts SET active_today = 0, active_now = 0
                WHERE active_today > 0 OR active_now > 0
                RETURNING location_id
                """,
            )
        )
        return len(rows)

    async def archive_daily(self, day: date) -> int:
        """Replace the archive rows of `day` with the current counters."""

        def write(cursor: duckdb.DuckDBPyConnection) -> int:
            cursor.execute("DELETE FROM geo_daily_stats WHERE stat_date = ?", [day])
            cursor.execute(
                """
                INSERT INTO geo_daily_stats (stat_date, category, county, town, total_registered, active_today)
                SELECT ?, b.category, b.county, b.town, b.total_registered, b.active_today
                FROM (
                    SELECT category,
                           COALESCE(county, 'Unknown') AS county,
                           COALESCE(town, 'Unknown') AS town,
                           SUM(total_registered) AS total_registered,
                           SUM(active_today) AS active_today
                    FROM active_location_counts
                    GROUP BY 1, 2, 3
                ) b
                """,
                [day],
            )
            count = fetch_rows(cursor, "SELECT COUNT(*) AS n FROM geo_daily_stats WHERE stat_date = ?", [day])
            return int(count[0]["n"])

        archived = await self.run(write)
        logger.info("Archived {} buckets for {}", archived, day)
        return archived
