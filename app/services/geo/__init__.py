"""Geo services."""

from app.services.geo.cdn import GeoCdnService
from app.services.geo.location import categorize_location, match_county
from app.services.geo.stats import GeoService
from app.services.geo.sync import GeoCdnSyncCron

__all__ = [
    "GeoService",
    "GeoCdnService",
    "GeoCdnSyncCron",
    "categorize_location",
    "match_county",
]
