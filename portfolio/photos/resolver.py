"""
Photo-set resolution: Google Photos album (opt-in), GitHub listing, samples.
"""
import logging
from typing import List, Optional

import requests

from config.settings import Settings
from portfolio.errors import AuthError, NotConfigured, ParseError, TransportError
from portfolio.oauth import OAuthClient
from portfolio.sources import Resolution, SourceTag, Tier, first_success
from .github import build_photos, list_image_files, load_photo_metadata, metadata_url
from .google_photos import find_album_by_title, list_album_media, media_item_to_photo
from .models import ResolvedPhoto
from .samples import get_sample_photos

logger = logging.getLogger("sources.photos")


class PhotoResolver:
    """Resolves the gallery from the highest-priority source with photos."""

    def __init__(
        self,
        settings: Settings,
        google_oauth: Optional[OAuthClient] = None,
        session: Optional[requests.Session] = None,
    ):
        self._settings = settings
        self._google_oauth = google_oauth
        self._session = session or requests.Session()
        self._timeout = settings.request_timeout_seconds

    def tiers(self) -> List[Tier[List[ResolvedPhoto]]]:
        tiers = []
        if self._settings.google_photos_album_title:
            tiers.append(Tier(SourceTag.GOOGLE_PHOTOS, self._from_google_photos))
        tiers.append(Tier(SourceTag.CONTENT_LISTING, self._from_github))
        tiers.append(Tier(SourceTag.SAMPLE_SET, get_sample_photos))
        return tiers

    def resolve(self) -> Resolution[List[ResolvedPhoto]]:
        return first_success(self.tiers(), domain="photos")

    def _from_github(self) -> List[ResolvedPhoto]:
        s = self._settings
        files = list_image_files(
            self._session,
            s.github_username,
            s.github_photos_repo,
            s.github_photos_path,
            timeout=self._timeout,
        )
        if not files:
            raise TransportError("no photos found in GitHub repository")
        logger.info(f"Found {len(files)} photos in GitHub repository")

        metadata = load_photo_metadata(
            self._session,
            metadata_url(
                s.github_username,
                s.github_photos_repo,
                s.github_photos_branch,
                s.github_photos_metadata_path,
            ),
            timeout=self._timeout,
        )
        return build_photos(files, metadata)

    def _from_google_photos(self) -> List[ResolvedPhoto]:
        if self._google_oauth is None or not self._google_oauth.is_configured:
            raise NotConfigured("Google Photos OAuth client credentials not set")
        access_token = self._google_oauth.get_cached_token()
        if not access_token:
            raise AuthError("no valid Google Photos token, authenticate at /auth/google-photos")

        title = self._settings.google_photos_album_title
        album = find_album_by_title(self._session, access_token, title, timeout=self._timeout)
        if album is None:
            raise TransportError(f"no Google Photos album matching '{title}'")

        if not album.get("id"):
            raise ParseError(f"Google Photos album '{title}' has no id")
        items = list_album_media(self._session, access_token, album["id"], timeout=self._timeout)
        photos = [media_item_to_photo(item) for item in items]
        if not photos:
            raise TransportError(f"Google Photos album '{title}' is empty")
        return photos
