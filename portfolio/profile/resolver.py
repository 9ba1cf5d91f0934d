"""
Profile resolution: LinkedIn OAuth, then external JSON feed, then baseline.
"""
import logging
from typing import List, Optional

import requests

from config.settings import Settings
from portfolio import api_client
from portfolio.errors import AuthError, NotConfigured, ParseError
from portfolio.oauth import OAuthClient
from portfolio.sources import Resolution, SourceTag, Tier, first_success
from .baseline import get_baseline_profile
from .linkedin import fetch_linkedin_profile, transform_linkedin_profile
from .models import ResolvedProfile, merge_over_baseline

logger = logging.getLogger("sources.profile")


class ProfileResolver:
    """
    Resolves the resume profile from the highest-priority working source.

    Both live tiers are merged field-by-field over the baseline, so a
    partial source never blanks out sections of the resume.
    """

    def __init__(
        self,
        settings: Settings,
        oauth: OAuthClient,
        session: Optional[requests.Session] = None,
    ):
        self._settings = settings
        self._oauth = oauth
        self._session = session or requests.Session()
        self._timeout = settings.request_timeout_seconds

    def baseline(self) -> ResolvedProfile:
        return get_baseline_profile(self._settings.profile_photo_url)

    def tiers(self) -> List[Tier[ResolvedProfile]]:
        return [
            Tier(SourceTag.OAUTH, self._from_oauth),
            Tier(SourceTag.EXTERNAL_FEED, self._from_external_feed),
            Tier(SourceTag.STATIC_FALLBACK, self.baseline),
        ]

    def resolve(self) -> Resolution[ResolvedProfile]:
        return first_success(self.tiers(), domain="profile")

    def _from_oauth(self) -> ResolvedProfile:
        if not self._oauth.is_configured:
            raise NotConfigured("LinkedIn OAuth client credentials not set")
        access_token = self._oauth.get_cached_token()
        if not access_token:
            raise AuthError("no valid LinkedIn token, authenticate at /auth/linkedin")
        logger.info("LinkedIn OAuth: using cached access token")
        raw = fetch_linkedin_profile(self._session, access_token, timeout=self._timeout)
        live = transform_linkedin_profile(raw, self._settings.profile_photo_url)
        return merge_over_baseline(live, self.baseline())

    def _from_external_feed(self) -> ResolvedProfile:
        url = self._settings.profile_json_url
        if not url:
            raise NotConfigured("PROFILE_JSON_URL not set")
        logger.info(f"Fetching profile from: {url}")
        data = api_client.get_json(
            self._session, url, headers=api_client.NO_CACHE_HEADERS, timeout=self._timeout
        )
        try:
            remote = ResolvedProfile.from_dict(data)
        except TypeError as e:
            raise ParseError(f"profile feed has unexpected shape: {e}") from e
        if not remote.profile_picture:
            remote.profile_picture = self._settings.profile_photo_url
        return merge_over_baseline(remote, self.baseline())
