"""Periodic CDN sync of geo snapshots."""

import asyncio
import time

from loguru import logger

from app.repositories.geo.location import utcnow
from app.services.geo.cdn import GeoCdnService
from settings import GEO_SYNC_INTERVAL

log = logger.bind(job="geo_cdn_sync")


class GeoCdnSyncCron:
    """Runs ``sync_to_cdn`` on a fixed interval.

    A tick never waits for the previous cycle; slow uploads can overlap.
    ``stop()`` only prevents future ticks.
    """

    def __init__(self, cdn_service: GeoCdnService, interval: float = GEO_SYNC_INTERVAL):
        self._cdn = cdn_service
        self.interval = interval
        self.is_running = False
        self.consecutive_failures = 0
        self.last_run_at = None
        self.last_result: dict | None = None
        self._task: asyncio.Task | None = None
        self._inflight: set[asyncio.Task] = set()

    async def start(self) -> None:
        if self.is_running:
            log.info("Geo CDN sync already running")
            return

        self.is_running = True
        log.info("Starting geo CDN sync every {}s", self.interval)
        await self.run_sync()

        # stop() may have been called during the first cycle
        if self.is_running:
            self._task = asyncio.create_task(self._tick())

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
        if self.is_running:
            self.is_running = False
            log.info("Geo CDN sync stopped")

    async def _tick(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            task = asyncio.create_task(self.run_sync())
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)

    async def sync_now(self) -> dict:
        """Run one cycle immediately; the timer is unaffected."""
        return await self.run_sync()

    async def run_sync(self) -> dict:
        start = time.perf_counter()
        try:
            result = await self._cdn.sync_to_cdn()
        except Exception as e:
            result = {"success": False, "error": str(e)}
        duration_ms = round((time.perf_counter() - start) * 1000)

        self.last_run_at = utcnow()
        self.last_result = result

        if result.get("success"):
            self.consecutive_failures = 0
            log.bind(records=result.get("records"), url=result.get("url"), duration_ms=duration_ms).info(
                "Geo data synced to CDN: {} records", result.get("records")
            )
        elif "message" in result:
            log.bind(duration_ms=duration_ms).info("Geo CDN sync skipped: {}", result["message"])
        else:
            self.consecutive_failures += 1
            log.bind(duration_ms=duration_ms, consecutive_failures=self.consecutive_failures).error(
                "Geo CDN sync failed: {}", result.get("error")
            )
        return result

    def status(self) -> dict:
        return {
            "running": self.is_running,
            "interval": self.interval,
            "consecutive_failures": self.consecutive_failures,
            "last_run_at": self.last_run_at.isoformat() if self.last_run_at else None,
            "last_result": self.last_result,
        }
