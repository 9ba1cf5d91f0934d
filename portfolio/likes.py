"""
Photo like counters kept in the cache store under photo-likes-{id}.
"""
import logging
from typing import Dict, Iterable

from portfolio.cache.store import CacheStore
from portfolio.utils.helpers import safe_int

logger = logging.getLogger("likes")

LIKES_KEY_PREFIX = "photo-likes-"


def likes_key(photo_id: str) -> str:
    return f"{LIKES_KEY_PREFIX}{photo_id}"


def get_likes(store: CacheStore, photo_id: str) -> int:
    """Current like count; unknown photos have zero."""
    return safe_int(store.get(likes_key(photo_id)))


def add_like(store: CacheStore, photo_id: str) -> int:
    """
    Increment and return the like count.

    Read-then-write with no locking: concurrent likes may be lost.
    """
    count = get_likes(store, photo_id) + 1
    store.put(likes_key(photo_id), str(count))
    logger.debug(f"Photo {photo_id} now has {count} likes")
    return count


def get_all_likes(store: CacheStore, photo_ids: Iterable[str]) -> Dict[str, int]:
    """Counts for the given photos, omitting photos without likes."""
    counts = {}
    for photo_id in photo_ids:
        count = get_likes(store, photo_id)
        if count:
            counts[photo_id] = count
    return counts
