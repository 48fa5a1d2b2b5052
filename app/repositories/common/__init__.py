from app.repositories.common.cache import CacheEntry, CacheRepository

__all__ = ["CacheEntry", "CacheRepository"]
