"""
Data models for the photography gallery.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from portfolio.utils.helpers import safe_optional_str, safe_str

DEFAULT_DESCRIPTION = "Beautiful bird photography captured in stunning detail."


@dataclass
class PhotoMetadata:
    """Optional capture details shown under a photo."""
    camera: Optional[str] = None
    lens: Optional[str] = None
    settings: Optional[str] = None
    location: Optional[str] = None
    date: Optional[str] = None
    tags: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "camera": self.camera,
            "lens": self.lens,
            "settings": self.settings,
            "location": self.location,
            "date": self.date,
            "tags": self.tags,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhotoMetadata":
        """Create from dictionary. Raises TypeError when data is not an object."""
        if not isinstance(data, dict):
            raise TypeError(f"photo metadata must be an object, got {type(data).__name__}")
        tags = data.get("tags")
        return cls(
            camera=safe_optional_str(data.get("camera")),
            lens=safe_optional_str(data.get("lens")),
            settings=safe_optional_str(data.get("settings")),
            location=safe_optional_str(data.get("location")),
            date=safe_optional_str(data.get("date")),
            tags=[safe_str(t) for t in tags] if isinstance(tags, list) else None,
        )


@dataclass
class ResolvedPhoto:
    """A gallery photo."""
    id: str
    base_url: str
    filename: str
    title: str
    description: str = DEFAULT_DESCRIPTION
    metadata: PhotoMetadata = field(default_factory=PhotoMetadata)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "baseUrl": self.base_url,
            "filename": self.filename,
            "title": self.title,
            "description": self.description,
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResolvedPhoto":
        """Create from dictionary. Raises KeyError when id/baseUrl are missing."""
        return cls(
            id=safe_str(data["id"]),
            base_url=safe_str(data["baseUrl"]),
            filename=safe_str(data.get("filename")),
            title=safe_str(data.get("title")),
            description=safe_str(data.get("description"), DEFAULT_DESCRIPTION),
            metadata=PhotoMetadata.from_dict(data.get("metadata") or {}),
        )


def photos_to_list(photos: List[ResolvedPhoto]) -> List[Dict[str, Any]]:
    return [p.to_dict() for p in photos]


def photos_from_list(data: List[Dict[str, Any]]) -> List[ResolvedPhoto]:
    if not isinstance(data, list):
        raise ValueError("photo list must be a JSON array")
    return [ResolvedPhoto.from_dict(d) for d in data]
