"""
TTL configuration and cache keys per data category.
"""
from enum import Enum
from typing import Dict, Any, Optional


class DataCategory(Enum):
    """Categories of data with different caching behaviors."""
    PROFILE = "profile"     # 24 hours
    PHOTOS = "photos"       # 1 hour


# TTL Configuration by category (in seconds)
TTL_CONFIG: Dict[DataCategory, Dict[str, Any]] = {
    DataCategory.PROFILE: {
        "ttl": 24 * 60 * 60,
        "cache_key": "linkedin_profile_data",
    },
    DataCategory.PHOTOS: {
        "ttl": 60 * 60,
        "cache_key": "github_photos_cache",
    },
}


def get_cache_key(category: DataCategory) -> str:
    """Storage key used for a category's resolved data."""
    return TTL_CONFIG[category]["cache_key"]


def get_ttl_ms(category: DataCategory, override_seconds: Optional[int] = None) -> int:
    """
    Get the TTL for a data category in milliseconds.

    Args:
        category: The data category
        override_seconds: Configured TTL that replaces the default

    Returns:
        TTL in milliseconds
    """
    seconds = override_seconds if override_seconds is not None else TTL_CONFIG[category]["ttl"]
    return int(seconds) * 1000
