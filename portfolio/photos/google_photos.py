"""
Google Photos Library API: photos from an album found by title.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from portfolio import api_client
from portfolio.errors import ParseError
from portfolio.utils.helpers import safe_lower, safe_optional_str, safe_str, title_from_filename
from .models import DEFAULT_DESCRIPTION, PhotoMetadata, ResolvedPhoto

logger = logging.getLogger("sources.google_photos")

PHOTOS_API_BASE = "https://photoslibrary.googleapis.com/v1"


def _albums(session, access_token: str, kind: str, timeout: float) -> List[Dict[str, Any]]:
    data = api_client.get_json(
        session,
        f"{PHOTOS_API_BASE}/{kind}",
        headers=api_client.bearer_headers(access_token),
        params={"pageSize": 50},
        timeout=timeout,
    )
    if not isinstance(data, dict):
        raise ParseError(f"Google Photos {kind} response is not an object")
    albums = data.get("albums") or data.get("sharedAlbums") or []
    return [a for a in albums if isinstance(a, dict)]


def find_album_by_title(
    session: requests.Session,
    access_token: str,
    title: str,
    timeout: float = api_client.DEFAULT_TIMEOUT,
) -> Optional[Dict[str, Any]]:
    """
    Case-insensitive substring match on album title, owned albums first,
    then albums shared with the user.
    """
    needle = safe_lower(title)
    for kind in ("albums", "sharedAlbums"):
        for album in _albums(session, access_token, kind, timeout):
            if needle in safe_lower(album.get("title")):
                return album
    return None


def list_album_media(
    session: requests.Session,
    access_token: str,
    album_id: str,
    timeout: float = api_client.DEFAULT_TIMEOUT,
) -> List[Dict[str, Any]]:
    data = api_client.post_json(
        session,
        f"{PHOTOS_API_BASE}/mediaItems:search",
        {"albumId": album_id, "pageSize": 100},
        headers=api_client.bearer_headers(access_token),
        timeout=timeout,
    )
    if not isinstance(data, dict):
        raise ParseError("Google Photos media response is not an object")
    return [m for m in data.get("mediaItems") or [] if isinstance(m, dict)]


def media_item_to_photo(item: Dict[str, Any]) -> ResolvedPhoto:
    """Map a Library API media item onto ResolvedPhoto."""
    media = item.get("mediaMetadata") or {}
    exif = media.get("photo") or {}

    camera = " ".join(
        safe_str(p) for p in (exif.get("cameraMake"), exif.get("cameraModel")) if p
    ) or None
    settings_parts = []
    if exif.get("apertureFNumber"):
        settings_parts.append(f"f/{exif['apertureFNumber']}")
    if exif.get("exposureTime"):
        settings_parts.append(str(exif["exposureTime"]))
    if exif.get("isoEquivalent"):
        settings_parts.append(f"ISO {exif['isoEquivalent']}")
    lens = f"{exif['focalLength']}mm" if exif.get("focalLength") else None

    filename = safe_str(item.get("filename") or item.get("id"))
    creation = safe_str(media.get("creationTime"))
    return ResolvedPhoto(
        id=safe_str(item.get("id") or filename),
        base_url=safe_str(item.get("baseUrl")),
        filename=filename,
        title=title_from_filename(filename),
        description=safe_optional_str(item.get("description")) or DEFAULT_DESCRIPTION,
        metadata=PhotoMetadata(
            camera=camera,
            lens=lens,
            settings=", ".join(settings_parts) or None,
            date=creation[:10] or None,
        ),
    )
