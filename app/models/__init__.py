"""Models package - DDL and entities for all domains."""

from app.models.geo import (
    DAILY_STATS_DDL,
    DEVICE_DDL,
    LOCATION_COUNTS_DDL,
    LOCATION_SEQ_DDL,
    CdnSnapshot,
    GeoAggregateRow,
    GeoCategory,
    Location,
)

ALL_DDL = [
    # Geo
    LOCATION_SEQ_DDL,
    LOCATION_COUNTS_DDL,
    DEVICE_DDL,
    DAILY_STATS_DDL,
]

__all__ = [
    # Geo
    "LOCATION_SEQ_DDL",
    "LOCATION_COUNTS_DDL",
    "DEVICE_DDL",
    "DAILY_STATS_DDL",
    "GeoCategory",
    "Location",
    "GeoAggregateRow",
    "CdnSnapshot",
    # All DDL
    "ALL_DDL",
]
