"""Services package - service class exports."""

from app.services.geo import GeoCdnService, GeoCdnSyncCron, GeoService

__all__ = [
    "GeoService",
    "GeoCdnService",
    "GeoCdnSyncCron",
]
