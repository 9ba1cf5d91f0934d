"""
Core cache data structures.
"""
import json
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional


# Clock returning epoch milliseconds; injectable for tests
Clock = Callable[[], int]


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def is_entry_valid(stored_at_ms: int, ttl_ms: int, current_ms: int) -> bool:
    """An entry is valid iff its age is strictly below its TTL."""
    return current_ms - stored_at_ms < ttl_ms


def ms_to_iso(epoch_ms: int) -> str:
    """Format epoch milliseconds as an ISO-8601 UTC timestamp."""
    dt = datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
    return dt.isoformat().replace("+00:00", "Z")


@dataclass
class CacheEntry:
    """
    A cached value tagged with the time it was stored and its TTL.

    The store itself has no expiry; validity is computed by the reader.
    """
    value: Any
    stored_at_ms: int
    ttl_ms: int

    @property
    def expires_at_ms(self) -> int:
        return self.stored_at_ms + self.ttl_ms

    def is_valid(self, current_ms: int) -> bool:
        return is_entry_valid(self.stored_at_ms, self.ttl_ms, current_ms)

    def to_json(self) -> str:
        return json.dumps({
            "value": self.value,
            "storedAt": self.stored_at_ms,
            "ttl": self.ttl_ms,
        })

    @classmethod
    def from_json(cls, raw: str) -> "CacheEntry":
        """
        Decode a stored entry.

        Raises:
            ValueError: If the payload is not a well-formed entry
        """
        data = json.loads(raw)
        if not isinstance(data, dict) or "value" not in data:
            raise ValueError("cache entry is missing 'value'")
        try:
            stored_at = int(data["storedAt"])
            ttl = int(data["ttl"])
        except (KeyError, TypeError, OverflowError) as e:
            raise ValueError(f"cache entry has bad timestamps: {e}") from e
        return cls(value=data["value"], stored_at_ms=stored_at, ttl_ms=ttl)


@dataclass
class CacheMeta:
    """
    Metadata about a cache access, included in API responses.
    """
    cached: bool
    source: Optional[str] = None
    stored_at_ms: Optional[int] = None
    expires_at_ms: Optional[int] = None

    @property
    def cache_expiry(self) -> Optional[str]:
        if self.expires_at_ms is None:
            return None
        return ms_to_iso(self.expires_at_ms)

    def to_dict(self) -> dict:
        """Convert to the envelope fields of a JSON response."""
        return {
            "cached": self.cached,
            "cacheExpiry": self.cache_expiry,
            "source": self.source,
        }
