"""
Photography gallery: models, sources and tiered resolution.
"""
from .models import PhotoMetadata, ResolvedPhoto, photos_from_list, photos_to_list
from .samples import get_sample_photos
from .resolver import PhotoResolver

__all__ = [
    "PhotoMetadata",
    "ResolvedPhoto",
    "photos_from_list",
    "photos_to_list",
    "get_sample_photos",
    "PhotoResolver",
]
