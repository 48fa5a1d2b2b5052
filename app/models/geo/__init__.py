"""Geo models - location counts, devices, daily archive."""

from app.models.geo.daily import DAILY_STATS_DDL
from app.models.geo.device import DEVICE_DDL
from app.models.geo.entities import CdnSnapshot, GeoAggregateRow, GeoCategory, Location
from app.models.geo.location import LOCATION_COUNTS_DDL, LOCATION_SEQ_DDL

__all__ = [
    "LOCATION_SEQ_DDL",
    "LOCATION_COUNTS_DDL",
    "DEVICE_DDL",
    "DAILY_STATS_DDL",
    "GeoCategory",
    "Location",
    "GeoAggregateRow",
    "CdnSnapshot",
]
