"""
Tiered source resolution.

A resolver declares an ordered list of tiers. Each tier runs once and
produces a TierOutcome (value or TierError); first_success returns the
first value and logs every failure on the way.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from portfolio.errors import NotConfigured, ResolutionFailed, TierError

logger = logging.getLogger("sources")

T = TypeVar("T")


class SourceTag(Enum):
    """Which tier produced a result. Diagnostics only."""
    OAUTH = "oauth"
    EXTERNAL_FEED = "external_feed"
    STATIC_FALLBACK = "static_fallback"
    GOOGLE_PHOTOS = "google_photos"
    CONTENT_LISTING = "content_listing"
    SAMPLE_SET = "sample_set"


@dataclass
class Tier(Generic[T]):
    """One candidate source in a priority-ordered chain."""
    tag: SourceTag
    fetch: Callable[[], T]


@dataclass
class TierOutcome(Generic[T]):
    """Result of running a single tier."""
    tag: SourceTag
    value: Optional[T] = None
    error: Optional[TierError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Resolution(Generic[T]):
    """A resolved value and the tier that produced it."""
    value: T
    source: SourceTag


def run_tier(tier: Tier[T]) -> TierOutcome[T]:
    """Run one tier, capturing tier errors instead of raising."""
    try:
        return TierOutcome(tag=tier.tag, value=tier.fetch())
    except NotConfigured as e:
        logger.debug(f"Tier {tier.tag.value} skipped: {e}")
        return TierOutcome(tag=tier.tag, error=e)
    except TierError as e:
        logger.warning(f"Tier {tier.tag.value} failed ({type(e).__name__}): {e}")
        return TierOutcome(tag=tier.tag, error=e)


def first_success(tiers: Sequence[Tier[T]], domain: str = "data") -> Resolution[T]:
    """
    Try tiers left to right and return the first success.

    Raises:
        ResolutionFailed: If every tier failed
    """
    errors: List[TierError] = []
    for tier in tiers:
        outcome = run_tier(tier)
        if outcome.ok:
            logger.info(f"Resolved {domain} from {tier.tag.value}")
            return Resolution(value=outcome.value, source=tier.tag)
        errors.append(outcome.error)
    raise ResolutionFailed(f"All {len(tiers)} tiers failed for {domain}", errors=errors)


def resolution_to_dict(resolution: Resolution, dump_value: Callable[[Any], Any]) -> dict:
    """Serialize a Resolution for the cache."""
    return {"source": resolution.source.value, "data": dump_value(resolution.value)}


def resolution_from_dict(raw: dict, load_value: Callable[[Any], Any]) -> Resolution:
    """Inverse of resolution_to_dict. Raises KeyError/ValueError on bad input."""
    return Resolution(value=load_value(raw["data"]), source=SourceTag(raw["source"]))
