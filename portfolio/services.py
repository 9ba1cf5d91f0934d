"""
Portfolio service: the operations the web layer calls.

A service is cheap to build and holds no state of its own; everything
durable lives in the cache store passed in. Build one per request.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import requests

from config.settings import Settings
from portfolio import likes
from portfolio.cache import CacheManager, CacheMeta, CacheStore, DataCategory, get_cache_key, get_ttl_ms
from portfolio.cache.core import Clock, now_ms
from portfolio.errors import CacheError, OAuthError, OAuthNotConfigured
from portfolio.oauth import (
    GOOGLE_PHOTOS,
    LINKEDIN,
    OAuthClient,
    TokenState,
    get_provider_config,
)
from portfolio.photos import PhotoResolver, ResolvedPhoto, photos_from_list, photos_to_list
from portfolio.profile import ProfileResolver, ResolvedProfile
from portfolio.projects import Project, get_projects
from portfolio.sources import resolution_from_dict, resolution_to_dict

logger = logging.getLogger("services")

# Data cache each provider's token feeds; cleared after a successful login
PROVIDER_DATA_CATEGORY = {
    LINKEDIN: DataCategory.PROFILE,
    GOOGLE_PHOTOS: DataCategory.PHOTOS,
}


@dataclass
class OAuthResult:
    """Outcome of an OAuth callback."""
    success: bool
    error: Optional[str] = None


class UnknownProvider(OAuthError):
    """No OAuth provider with that name."""
    pass


class PortfolioService:
    """Profile, photos, OAuth and likes on top of one cache store."""

    def __init__(
        self,
        settings: Settings,
        store: CacheStore,
        session: Optional[requests.Session] = None,
        clock: Optional[Clock] = None,
    ):
        self.settings = settings
        self.store = store
        self._session = session or requests.Session()
        self._clock = clock or now_ms
        self._cache = CacheManager(store, clock=self._clock)
        self._oauth_clients: Dict[str, OAuthClient] = {}

    # ===== OAUTH CLIENTS =====

    def oauth_client(self, provider: str) -> OAuthClient:
        """
        Client for a provider name ("linkedin" or "google-photos").

        Raises:
            UnknownProvider: For any other name
        """
        if provider not in self._oauth_clients:
            config = get_provider_config(provider, self.settings)
            if config is None:
                raise UnknownProvider(f"Unknown OAuth provider: {provider}")
            self._oauth_clients[provider] = OAuthClient(
                config,
                self.store,
                session=self._session,
                clock=self._clock,
                timeout=self.settings.request_timeout_seconds,
                expiry_skew_ms=self.settings.token_expiry_skew_seconds * 1000,
            )
        return self._oauth_clients[provider]

    # ===== PROFILE =====

    def profile_resolver(self) -> ProfileResolver:
        return ProfileResolver(self.settings, self.oauth_client(LINKEDIN), session=self._session)

    def resolve_profile(self) -> Tuple[ResolvedProfile, CacheMeta]:
        """Resume profile from cache or the first working tier. Never fails."""
        resolution, meta = self._cache.get_or_resolve(
            get_cache_key(DataCategory.PROFILE),
            get_ttl_ms(DataCategory.PROFILE, self.settings.profile_cache_ttl_seconds),
            self.profile_resolver().resolve,
            dump=lambda r: resolution_to_dict(r, ResolvedProfile.to_dict),
            load=lambda raw: resolution_from_dict(raw, ResolvedProfile.from_dict),
        )
        return resolution.value, meta

    def clear_profile_cache(self) -> None:
        self._cache.invalidate(get_cache_key(DataCategory.PROFILE))

    # ===== PHOTOS =====

    def photo_resolver(self) -> PhotoResolver:
        google = self.oauth_client(GOOGLE_PHOTOS)
        return PhotoResolver(self.settings, google_oauth=google, session=self._session)

    def resolve_photos(self) -> Tuple[List[ResolvedPhoto], CacheMeta]:
        """Gallery photos from cache or the first working tier. Never fails."""
        resolution, meta = self._cache.get_or_resolve(
            get_cache_key(DataCategory.PHOTOS),
            get_ttl_ms(DataCategory.PHOTOS, self.settings.photos_cache_ttl_seconds),
            self.photo_resolver().resolve,
            dump=lambda r: resolution_to_dict(r, photos_to_list),
            load=lambda raw: resolution_from_dict(raw, photos_from_list),
        )
        return resolution.value, meta

    def clear_photo_cache(self) -> None:
        self._cache.invalidate(get_cache_key(DataCategory.PHOTOS))

    # ===== OAUTH FLOW =====

    def clear_oauth_token(self, provider: str = LINKEDIN) -> None:
        self.oauth_client(provider).clear_token()

    def begin_oauth(self, provider: str, state: Optional[str] = None) -> str:
        """
        Authorization URL to redirect the user to.

        Raises:
            OAuthNotConfigured: Client credentials missing
            UnknownProvider: Unknown provider name
        """
        return self.oauth_client(provider).authorization_url(state=state)

    def complete_oauth(self, provider: str, code: str) -> OAuthResult:
        """
        Exchange the callback code for a token.

        On success the data cache fed by this provider is cleared so the
        next read uses the new token.
        """
        try:
            self.oauth_client(provider).exchange_code(code)
        except OAuthNotConfigured as e:
            return OAuthResult(success=False, error=f"{e}. Please set the client ID and secret.")
        except OAuthError as e:
            logger.error(f"OAuth callback error for {provider}: {e}")
            return OAuthResult(success=False, error=str(e))

        category = PROVIDER_DATA_CATEGORY.get(provider)
        if category is not None:
            self._cache.invalidate(get_cache_key(category))
        return OAuthResult(success=True)

    def oauth_status(self) -> Dict[str, Dict[str, object]]:
        """Configuration and token state per provider."""
        status = {}
        for provider in (LINKEDIN, GOOGLE_PHOTOS):
            client = self.oauth_client(provider)
            state = client.status() if client.is_configured else TokenState.UNAUTHENTICATED
            status[provider] = {"configured": client.is_configured, "state": state.value}
        return status

    # ===== PROJECTS & LIKES =====

    def get_projects(self) -> List[Project]:
        return get_projects()

    def get_likes(self, photo_id: str) -> int:
        """
        Raises:
            CacheError: Store failure
        """
        return likes.get_likes(self.store, photo_id)

    def add_like(self, photo_id: str) -> int:
        """
        Raises:
            CacheError: Store failure
        """
        return likes.add_like(self.store, photo_id)

    def get_all_likes(self) -> Dict[str, int]:
        """Like counts for every photo currently in the gallery."""
        photos, _ = self.resolve_photos()
        try:
            return likes.get_all_likes(self.store, [p.id for p in photos])
        except CacheError as e:
            logger.warning(f"Could not read like counts: {e}")
            return {}
