"""
Cache-aside orchestration over a string key-value store.
"""
import logging
from typing import Any, Callable, Optional, Tuple

from portfolio.errors import CacheError
from .core import CacheEntry, CacheMeta, Clock, now_ms
from .store import CacheStore

logger = logging.getLogger("cache.manager")


def _identity(value: Any) -> Any:
    return value


class CacheManager:
    """
    Read-through cache around a resolution function.

    - Fresh entries short-circuit resolution
    - Expired or undecodable entries are deleted and re-resolved
    - Store failures never fail the call: a failed read is a miss,
      a failed write or delete is dropped
    - No locking: concurrent misses may both resolve, last write wins
    """

    def __init__(self, store: CacheStore, clock: Optional[Clock] = None):
        """
        Initialize the cache manager.

        Args:
            store: Backend holding serialized CacheEntry values
            clock: Returns current epoch milliseconds
        """
        self._store = store
        self._clock = clock or now_ms

    def get_or_resolve(
        self,
        cache_key: str,
        ttl_ms: int,
        resolve_fn: Callable[[], Any],
        dump: Callable[[Any], Any] = _identity,
        load: Callable[[Any], Any] = _identity,
    ) -> Tuple[Any, CacheMeta]:
        """
        Get data from cache or resolve it.

        Args:
            cache_key: Unique cache key
            ttl_ms: Time-to-live of a fresh entry
            resolve_fn: Zero-argument function producing the value on a miss
            dump: Converts the value to something JSON-serializable
            load: Inverse of dump, applied to cached values

        Returns:
            (value, cache_meta) tuple

        Raises:
            ResolutionFailed: Propagated from resolve_fn
        """
        entry = self._read(cache_key)
        current = self._clock()

        if entry is not None:
            if entry.is_valid(current):
                try:
                    value = load(entry.value)
                except (ValueError, TypeError, KeyError) as e:
                    logger.warning(f"CACHE UNDECODABLE: {cache_key} - {e}")
                    self._delete(cache_key)
                else:
                    age = (current - entry.stored_at_ms) / 1000
                    logger.info(f"CACHE HIT: {cache_key} [age={age:.1f}s]")
                    return value, CacheMeta(
                        cached=True,
                        source=_source_of(value),
                        stored_at_ms=entry.stored_at_ms,
                        expires_at_ms=entry.expires_at_ms,
                    )
            else:
                logger.info(f"CACHE EXPIRED: {cache_key}")
                self._delete(cache_key)
        else:
            logger.info(f"CACHE MISS: {cache_key}")

        value = resolve_fn()
        stored_at = self._clock()
        self._write(cache_key, CacheEntry(value=dump(value), stored_at_ms=stored_at, ttl_ms=ttl_ms))
        return value, CacheMeta(
            cached=False,
            source=_source_of(value),
            stored_at_ms=stored_at,
            expires_at_ms=stored_at + ttl_ms,
        )

    def invalidate(self, cache_key: str) -> None:
        """Delete a cache entry; store failures are logged and dropped."""
        self._delete(cache_key)
        logger.info(f"Invalidated cache: {cache_key}")

    def _read(self, cache_key: str) -> Optional[CacheEntry]:
        try:
            raw = self._store.get(cache_key)
        except CacheError as e:
            logger.warning(f"Cache read failed, treating as miss: {e}")
            return None
        if raw is None:
            return None
        try:
            return CacheEntry.from_json(raw)
        except ValueError as e:
            logger.warning(f"CACHE UNDECODABLE: {cache_key} - {e}")
            self._delete(cache_key)
            return None

    def _write(self, cache_key: str, entry: CacheEntry) -> None:
        try:
            self._store.put(cache_key, entry.to_json())
        except (CacheError, TypeError, ValueError) as e:
            logger.warning(f"Cache write dropped for {cache_key}: {e}")

    def _delete(self, cache_key: str) -> None:
        try:
            self._store.delete(cache_key)
        except CacheError as e:
            logger.warning(f"Cache delete failed for {cache_key}: {e}")


def _source_of(value: Any) -> Optional[str]:
    """Source tag of a Resolution-like value, if it carries one."""
    source = getattr(value, "source", None)
    if source is None:
        return None
    return getattr(source, "value", source)
