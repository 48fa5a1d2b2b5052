#!/usr/bin/env python3
"""
Geo maintenance jobs.

Usage:
    python sync_data.py                # Publish geo snapshot to the CDN
    python sync_data.py --archive      # Archive today's counters
    python sync_data.py --cleanup      # Drop stale devices, clear idle buckets
    python sync_data.py --reset-daily  # Zero daily/live counters
    python sync_data.py --stats        # Print geo stats
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)

JOBS = {
    "--archive": lambda: container.geo.archive_daily_stats(),
    "--cleanup": lambda: container.geo.cleanup_old_devices(),
    "--reset-daily": lambda: container.geo.reset_daily_counts(),
    "--stats": lambda: container.geo.get_geo_stats(),
}


async def run(args: list[str]) -> bool:
    jobs = [a for a in args if a in JOBS]
    if any(a not in JOBS for a in args):
        print(__doc__)
        return False

    container.init()
    try:
        if not jobs:
            logger.info("Syncing geo data to CDN...")
            result = await container.geo_sync.sync_now()
            if "message" in result:
                logger.warning(result["message"])
                return True
            return bool(result.get("success"))

        ok = True
        for job in jobs:
            logger.info("Running {}", job.lstrip("-"))
            result = await JOBS[job]()
            print(json.dumps(result, indent=2, default=str))
            ok = ok and bool(result.get("success"))
        return ok
    finally:
        await container.dispose()


def main():
    ok = asyncio.run(run(sys.argv[1:]))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
