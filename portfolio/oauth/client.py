"""
Authorization-code OAuth client with lazily refreshed cached tokens.

Token lifecycle:
    Unauthenticated -> Authorized      code exchange succeeded
    Authorized      -> Expired         detected on read (now > expires_at - skew)
    Expired         -> Authorized      refresh token present and refresh succeeded
    Expired         -> Unauthenticated no refresh token, or refresh failed
    any             -> Unauthenticated clear_token()

The protocol itself (authorization URL, code and refresh grants) is
handled by authlib's OAuth2Session; this module owns token persistence.
"""
import json
import logging
from typing import Any, Callable, Dict, Optional

import requests
from authlib.integrations.requests_client import OAuth2Session
from authlib.integrations.requests_client import OAuthError as AuthlibOAuthError

from portfolio import api_client
from portfolio.cache.core import Clock, now_ms
from portfolio.cache.store import CacheStore
from portfolio.errors import (
    AuthError,
    CacheError,
    OAuthError,
    OAuthNotConfigured,
    ParseError,
    TierError,
    TransportError,
)
from .providers import OAuthProviderConfig
from .tokens import OAuthTokenRecord, TokenState

logger = logging.getLogger("oauth.client")

DEFAULT_EXPIRY_SKEW_MS = 5 * 60 * 1000


class OAuthClient:
    """
    OAuth client for a single provider.

    Tokens live in the shared cache store under the provider's
    token_cache_key, so every request sees the same token.
    """

    def __init__(
        self,
        config: OAuthProviderConfig,
        store: CacheStore,
        session: Optional[requests.Session] = None,
        clock: Optional[Clock] = None,
        timeout: float = api_client.DEFAULT_TIMEOUT,
        expiry_skew_ms: int = DEFAULT_EXPIRY_SKEW_MS,
    ):
        self.config = config
        self._store = store
        self._clock = clock or now_ms
        self._timeout = timeout
        self._skew_ms = expiry_skew_ms
        self._oauth = OAuth2Session(
            client_id=config.client_id,
            client_secret=config.client_secret,
            token_endpoint_auth_method="client_secret_post",
            scope=config.scopes,
            redirect_uri=config.redirect_uri,
        )
        # Token-endpoint requests go through the shared HTTP session
        if session is not None:
            self._oauth.session = session

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def authorization_url(self, state: Optional[str] = None) -> str:
        """
        Build the provider's authorization URL.

        Raises:
            OAuthNotConfigured: If client credentials are missing
        """
        if not self.is_configured:
            raise OAuthNotConfigured(self.config.display_name)
        url, _ = self._oauth.create_authorization_url(
            self.config.authorize_url, state=state, **self.config.extra_auth_params
        )
        return url

    def exchange_code(self, code: str) -> OAuthTokenRecord:
        """
        Exchange an authorization code for a token and persist it.

        Raises:
            OAuthNotConfigured: If client credentials are missing
            OAuthError: If the provider rejected the code
        """
        if not self.is_configured:
            raise OAuthNotConfigured(self.config.display_name)
        try:
            token = self._token_request(lambda oauth: oauth.fetch_token(
                self.config.token_url,
                grant_type="authorization_code",
                code=code,
                timeout=self._timeout,
            ))
            record = OAuthTokenRecord.from_token_response(token, self._clock())
        except TierError as e:
            raise OAuthError(f"{self.config.display_name} token exchange failed: {e}") from e

        self.cache_token(record)
        logger.info(f"{self.config.display_name} OAuth: token stored")
        return record

    def refresh(self, refresh_token: str) -> OAuthTokenRecord:
        """
        Trade a refresh token for a new access token (not persisted).

        Raises:
            TierError: Transport, auth or parse failure
        """
        token = self._token_request(lambda oauth: oauth.refresh_token(
            self.config.token_url,
            refresh_token=refresh_token,
            timeout=self._timeout,
        ))
        return OAuthTokenRecord.from_token_response(
            token, self._clock(), previous_refresh_token=refresh_token
        )

    def _token_request(self, call: Callable[[OAuth2Session], Any]) -> Dict[str, Any]:
        """Run one token-endpoint call, translating failures into tier errors."""
        name = self.config.display_name
        try:
            token = call(self._oauth)
        except AuthlibOAuthError as e:
            raise AuthError(f"{name} rejected the grant: {e}") from e
        except ValueError as e:
            raise ParseError(f"{name} token endpoint returned malformed JSON: {e}") from e
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(f"{name} token endpoint failed: {e}", status_code=status) from e
        except requests.RequestException as e:
            raise TransportError(f"{name} token request failed: {e}") from e
        if not isinstance(token, dict):
            raise ParseError(f"{name} token response is not an object")
        return dict(token)

    def get_cached_token(self) -> Optional[str]:
        """
        Return a usable access token, refreshing once if it has expired.

        Returns None when unauthenticated; in that case any stale
        record has been deleted.
        """
        record = self._read_record(delete_malformed=True)
        if record is None:
            return None

        if not record.is_expired(self._clock(), self._skew_ms):
            return record.access_token

        if not record.refresh_token:
            logger.info(f"{self.config.display_name} OAuth: token expired, no refresh token")
            self.clear_token()
            return None

        try:
            refreshed = self.refresh(record.refresh_token)
        except TierError as e:
            logger.error(f"Error refreshing {self.config.display_name} token: {e}")
            self.clear_token()
            return None

        self.cache_token(refreshed)
        logger.info(f"{self.config.display_name} OAuth: token refreshed")
        return refreshed.access_token

    def cache_token(self, record: OAuthTokenRecord) -> None:
        """Persist a token record; a store failure is logged, not raised."""
        try:
            self._store.put(self.config.token_cache_key, json.dumps(record.to_dict()))
        except CacheError as e:
            logger.error(f"Error caching {self.config.display_name} token: {e}")

    def clear_token(self) -> None:
        """Forget the cached token, forcing re-authentication."""
        try:
            self._store.delete(self.config.token_cache_key)
        except CacheError as e:
            logger.error(f"Error clearing {self.config.display_name} token: {e}")

    def status(self) -> TokenState:
        """Current lifecycle state, without refreshing or deleting anything."""
        record = self._read_record()
        if record is None:
            return TokenState.UNAUTHENTICATED
        if record.is_expired(self._clock(), self._skew_ms):
            return TokenState.EXPIRED
        return TokenState.AUTHORIZED

    def _read_record(self, delete_malformed: bool = False) -> Optional[OAuthTokenRecord]:
        try:
            raw = self._store.get(self.config.token_cache_key)
        except CacheError as e:
            logger.error(f"Error getting cached {self.config.display_name} token: {e}")
            return None
        if not raw:
            return None
        try:
            return OAuthTokenRecord.from_dict(json.loads(raw))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed {self.config.display_name} token record: {e}")
            if delete_malformed:
                self.clear_token()
            return None
