"""
GitHub-hosted photos: a contents-API directory listing plus an optional
metadata document keyed by filename.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from portfolio import api_client
from portfolio.errors import ParseError, TierError, TransportError
from portfolio.utils.helpers import (
    safe_int,
    safe_lower,
    safe_optional_str,
    safe_str,
    title_from_filename,
)
from .models import DEFAULT_DESCRIPTION, PhotoMetadata, ResolvedPhoto

logger = logging.getLogger("sources.github_photos")

GITHUB_API_BASE = "https://api.github.com"
GITHUB_RAW_BASE = "https://raw.githubusercontent.com"
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".gif")

GITHUB_HEADERS = {
    "Accept": "application/vnd.github.v3+json",
    "User-Agent": "Portfolio-Website",
}


@dataclass
class ContentFile:
    """A file descriptor from the contents listing."""
    name: str
    download_url: str
    size: int
    content_hash: str


def is_image_file(entry: Dict[str, Any]) -> bool:
    """True for regular files with an image extension (case-insensitive)."""
    return (
        entry.get("type") == "file"
        and safe_lower(entry.get("name")).endswith(IMAGE_EXTENSIONS)
    )


def list_image_files(
    session: requests.Session,
    username: str,
    repo: str,
    path: str,
    timeout: float = api_client.DEFAULT_TIMEOUT,
) -> List[ContentFile]:
    """
    List image files in a repository directory.

    A missing directory (404) is an empty listing, not an error.

    Raises:
        TierError: Transport, auth or parse failure
    """
    url = f"{GITHUB_API_BASE}/repos/{username}/{repo}/contents/{path}"
    logger.info(f"Fetching from GitHub API: {url}")
    try:
        entries = api_client.get_json(session, url, headers=GITHUB_HEADERS, timeout=timeout)
    except TransportError as e:
        if e.status_code == 404:
            logger.info("GitHub photos directory not found")
            return []
        raise

    if not isinstance(entries, list):
        raise ParseError("GitHub contents response is not a list")

    return [
        ContentFile(
            name=entry["name"],
            download_url=safe_str(entry.get("download_url")),
            size=safe_int(entry.get("size")),
            content_hash=safe_str(entry.get("sha")),
        )
        for entry in entries
        if isinstance(entry, dict) and is_image_file(entry)
    ]


def load_photo_metadata(
    session: requests.Session,
    url: str,
    timeout: float = api_client.DEFAULT_TIMEOUT,
) -> List[Dict[str, Any]]:
    """
    Load the optional metadata document (a JSON list).

    Any failure yields an empty list: missing metadata never fails the tier.
    """
    logger.info(f"Fetching photo metadata from: {url}")
    try:
        metadata = api_client.get_json(session, url, timeout=timeout)
    except TierError as e:
        logger.info(f"Photo metadata unavailable, using defaults: {e}")
        return []
    if not isinstance(metadata, list):
        return []
    return [m for m in metadata if isinstance(m, dict)]


def _find_metadata(
    photo: ContentFile, metadata: List[Dict[str, Any]]
) -> Optional[Dict[str, Any]]:
    for entry in metadata:
        if entry.get("filename") == photo.name or entry.get("id") == photo.content_hash:
            return entry
    return None


def build_photos(files: List[ContentFile], metadata: List[Dict[str, Any]]) -> List[ResolvedPhoto]:
    """Pair listed files with metadata, keeping listing order."""
    photos = []
    for file in files:
        entry = _find_metadata(file, metadata) or {}
        photos.append(ResolvedPhoto(
            id=file.content_hash,
            base_url=file.download_url,
            filename=file.name,
            title=safe_optional_str(entry.get("title")) or title_from_filename(file.name),
            description=safe_optional_str(entry.get("description")) or DEFAULT_DESCRIPTION,
            metadata=PhotoMetadata.from_dict(entry),
        ))
    return photos


def metadata_url(username: str, repo: str, branch: str, path: str) -> str:
    return f"{GITHUB_RAW_BASE}/{username}/{repo}/{branch}/{path}"
