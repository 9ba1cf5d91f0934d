"""
Tier combinator shared by the profile and photo resolvers.
"""
from .base import (
    Resolution,
    SourceTag,
    Tier,
    TierOutcome,
    first_success,
    resolution_from_dict,
    resolution_to_dict,
    run_tier,
)

__all__ = [
    "Resolution",
    "SourceTag",
    "Tier",
    "TierOutcome",
    "first_success",
    "resolution_from_dict",
    "resolution_to_dict",
    "run_tier",
]
