"""
Resume profile: canonical models, baseline data and tiered resolution.
"""
from .models import (
    Certification,
    Education,
    Experience,
    ResolvedProfile,
    merge_over_baseline,
)
from .baseline import get_baseline_profile
from .resolver import ProfileResolver

__all__ = [
    "Certification",
    "Education",
    "Experience",
    "ResolvedProfile",
    "merge_over_baseline",
    "get_baseline_profile",
    "ProfileResolver",
]
