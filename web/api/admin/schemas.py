"""Admin geo API schemas."""

from pydantic import BaseModel


class CacheClearRequest(BaseModel):
    """Substring of keys to drop; everything when omitted."""

    pattern: str | None = None


class CacheStats(BaseModel):
    total: int
    max_size: int
    hits: int
    misses: int
    hit_rate: str


class CdnNodeResponse(BaseModel):
    county: str | None
    town: str | None
    cdn_node: str
    is_local_node: bool
