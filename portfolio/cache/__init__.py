"""
Cache-aside module: timestamped entries over a plain key-value store.
"""
from .core import CacheEntry, CacheMeta, Clock, is_entry_valid, now_ms
from .ttl_policies import DataCategory, TTL_CONFIG, get_cache_key, get_ttl_ms
from .store import CacheStore, MemoryCacheStore, SqlCacheStore, build_cache_store
from .manager import CacheManager

__all__ = [
    # Core types
    "CacheEntry",
    "CacheMeta",
    "Clock",
    "is_entry_valid",
    "now_ms",
    # TTL policies
    "DataCategory",
    "TTL_CONFIG",
    "get_cache_key",
    "get_ttl_ms",
    # Stores
    "CacheStore",
    "MemoryCacheStore",
    "SqlCacheStore",
    "build_cache_store",
    # Manager
    "CacheManager",
]
