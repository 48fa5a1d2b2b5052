"""Geo CDN service - snapshot publishing and CDN-first reads."""

import httpx
from loguru import logger

from app.models.geo import CdnSnapshot, GeoAggregateRow
from app.repositories.common import CacheRepository
from app.repositories.geo import LocationRepository
from app.repositories.geo.location import utcnow
from cdn_client import CdnClient, R2Storage, UploadFile
from settings import CDN_GLOBAL_NODE, CDN_NODES, R2_PUBLIC_URL

CDN_FOLDER = "geo-data"
CDN_FILENAME = "geo-data.json"
CDN_URL_KEY = "geo-cdn-url"
CDN_URL_TTL = 3600
SNAPSHOT_KEY = "geo-database-snapshot"
SNAPSHOT_TTL = 300
SNAPSHOT_LIMIT = 1000


class GeoCdnService:
    """Publishes geo snapshots to R2 and reads them back with fallbacks.

    Read order: CDN object -> cached snapshot -> database.
    """

    def __init__(
        self,
        location_repo: LocationRepository,
        cache_repo: CacheRepository,
        storage: R2Storage,
        cdn_client: CdnClient,
        nodes: dict[str, str] | None = None,
        global_node: str | None = R2_PUBLIC_URL,
    ):
        self._locations = location_repo
        self._cache = cache_repo
        self._storage = storage
        self._client = cdn_client
        self._nodes = {k.upper(): v for k, v in (CDN_NODES if nodes is None else nodes).items()}
        self._global_node = global_node
        logger.debug("GeoCdnService initialized ({} edge nodes)", len(self._nodes))

    async def _build_snapshot(self) -> CdnSnapshot:
        rows = await self._locations.get_snapshot_rows(SNAPSHOT_LIMIT)
        data = [GeoAggregateRow(**r) for r in rows]
        return CdnSnapshot(timestamp=utcnow(), total_records=len(data), data=data)

    async def sync_to_cdn(self) -> dict:
        """Upload the current snapshot to `geo-data/geo-data.json`."""
        if not self._storage.is_enabled():
            return {"success": False, "message": "Cloudflare not configured"}

        try:
            snapshot = await self._build_snapshot()
            body = snapshot.model_dump_json(by_alias=True, indent=2).encode()
            upload = await self._storage.upload_file(
                UploadFile(buffer=body, originalname=CDN_FILENAME, mimetype="application/json", size=len(body)),
                CDN_FOLDER,
                timestamped=False,
            )
        except Exception as e:
            logger.error("Error syncing geo data to Cloudflare: {}", e)
            return {"success": False, "error": str(e)}

        # no public base: reads fall back to the database
        if upload.url:
            self._cache.set(CDN_URL_KEY, upload.url, CDN_URL_TTL)
        return {
            "success": True,
            "url": upload.url,
            "records": snapshot.total_records,
            "timestamp": snapshot.timestamp.isoformat(),
        }

    async def get_geo_data(self) -> dict:
        """Snapshot from the CDN, falling back to cache and database."""
        if not self._storage.is_enabled():
            return await self.get_geo_data_from_database()

        cdn_url = self._cache.get(CDN_URL_KEY) or self._storage.get_public_url(f"{CDN_FOLDER}/{CDN_FILENAME}")
        if not cdn_url:
            return await self.get_geo_data_from_database()

        try:
            resp = await self._client.fetch(cdn_url)
            if not resp.is_success:
                logger.warning("CDN returned {} for {}, falling back to database", resp.status_code, cdn_url)
                return await self.get_geo_data_from_database()
            data = resp.json()
            if not isinstance(data, dict):
                raise ValueError("CDN snapshot is not a JSON object")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Error fetching from CDN, falling back to database: {}", e)
            return await self.get_geo_data_from_database()

        return {"success": True, "source": "cdn", "cdn_url": cdn_url, **data}

    async def get_geo_data_from_database(self) -> dict:
        cached = self._cache.get(SNAPSHOT_KEY)
        if cached is not None:
            return {"success": True, "source": "cache", **cached}

        try:
            snapshot = await self._build_snapshot()
        except Exception as e:
            logger.error("Error fetching geo data from database: {}", e)
            return {"success": False, "error": str(e), "data": []}

        result = snapshot.model_dump(mode="json", by_alias=True)
        self._cache.set(SNAPSHOT_KEY, result, SNAPSHOT_TTL)
        return {"success": True, "source": "database", **result}

    def get_nearest_cdn_node(self, county: str | None, town: str | None = None) -> dict:
        """Edge node serving a county; unmatched counties get the global node."""
        node = self._nodes.get(county.upper()) if county else None
        return {
            "county": county,
            "town": town,
            "cdn_node": node or self._global_node or CDN_GLOBAL_NODE,
            "is_local_node": node is not None,
        }
