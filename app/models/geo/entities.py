"""Geo domain entities - locations, aggregate rows and CDN snapshots."""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class GeoCategory(StrEnum):
    """Coarse audience region."""

    KENYA = "KENYA"
    EAST_AFRICA = "EAST_AFRICA"
    AFRICA = "AFRICA"
    GLOBAL = "GLOBAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class Location:
    """Categorized visitor location."""

    county: str | None
    town: str | None
    category: str

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)


class GeoAggregateRow(BaseModel):
    """One (category, county, town) bucket of active_location_counts."""

    category: str
    county: str | None = None
    town: str | None = None
    total_registered: int = 0
    active_today: int = 0
    active_now: int = 0
    last_activity: datetime | None = None


class CdnSnapshot(BaseModel):
    """Snapshot published to the CDN; serialized with camelCase keys."""

    timestamp: datetime
    total_records: int = Field(alias="totalRecords")
    data: list[GeoAggregateRow]

    class Config:
        populate_by_name = True
