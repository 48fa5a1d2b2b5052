"""Cache repository - in-process TTL cache shared across all domains."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from cachetools import FIFOCache
from loguru import logger

from settings import CACHE_CONFIG


@dataclass
class CacheEntry:
    """Cached value with its insertion time and lifetime."""

    value: Any
    inserted_at: float
    ttl: float

    def expired(self, now: float) -> bool:
        return now - self.inserted_at >= self.ttl


class _EntryStore(FIFOCache):
    """FIFO store that drops the oldest insertion when full."""

    def popitem(self):
        key, entry = super().popitem()
        logger.debug("Cache evicted: {}", key)
        return key, entry


class CacheRepository:
    """In-memory key/value cache with per-entry TTL and one global size bound.

    Expiry is lazy: a stale entry stays in the store (and in ``total``) until
    the ``get`` that finds it. Eviction is by insertion order, checked on
    ``set`` only. Namespace configs supply TTLs; capacity always comes from
    the ``default`` namespace.
    """

    def __init__(
        self,
        config: dict[str, dict[str, float]] | None = None,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._config = config or CACHE_CONFIG
        self._max_size = int(self._config["default"]["max_size"])
        self._timer = timer
        self._entries = _EntryStore(maxsize=self._max_size)
        self.hits = 0
        self.misses = 0
        logger.debug("CacheRepository initialized (max_size={})", self._max_size)

    @property
    def max_size(self) -> int:
        return self._max_size

    def ttl_for(self, namespace: str) -> float:
        """TTL configured for a namespace, or the default one."""
        conf = self._config.get(namespace) or self._config["default"]
        return conf["ttl"]

    def get(self, key: str) -> Any | None:
        """Return a live value, or None on miss/expiry."""
        key = str(key)
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return None

        if entry.expired(self._timer()):
            del self._entries[key]
            self.misses += 1
            logger.debug("Cache expired: {}", key)
            return None

        self.hits += 1
        return entry.value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store a value; the oldest insertions are evicted past max_size."""
        if ttl is None:
            ttl = self.ttl_for("default")
        key = str(key)
        # overwriting must count as a fresh insertion for eviction order
        self._entries.pop(key, None)
        self._entries[key] = CacheEntry(value=value, inserted_at=self._timer(), ttl=ttl)

    def clear(self, pattern: str | None = None) -> int:
        """Delete keys containing `pattern`, or everything (and counters)."""
        if pattern:
            keys = [k for k in self._entries if pattern in k]
            for k in keys:
                del self._entries[k]
            logger.debug("Cache cleared {} keys matching '{}'", len(keys), pattern)
            return len(keys)

        size = len(self._entries)
        self._entries = _EntryStore(maxsize=self._max_size)
        self.hits = 0
        self.misses = 0
        logger.info("All cache cleared ({} entries)", size)
        return size

    def get_stats(self) -> dict:
        accesses = self.hits + self.misses
        return {
            "total": len(self._entries),
            "max_size": self._max_size,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": f"{self.hits / accesses * 100:.2f}%" if accesses else "0%",
        }

    def warmup(self, items: Any, key_prefix: str, ttl: float | None = None) -> None:
        """Preload a sequence under `{key_prefix}:{id or index}` keys."""
        if not isinstance(items, (list, tuple)):
            return

        for index, item in enumerate(items):
            item_id = _item_id(item)
            self.set(f"{key_prefix}:{index if item_id is None else item_id}", item, ttl)
        logger.debug("Cache warmed with {} items under '{}'", len(items), key_prefix)


def _item_id(item: Any) -> Any:
    if isinstance(item, dict):
        return item.get("id")
    return getattr(item, "id", None)
