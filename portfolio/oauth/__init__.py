"""
OAuth authorization-code flow and token lifecycle for external providers.
"""
from .tokens import OAuthTokenRecord, TokenState
from .providers import (
    GOOGLE_PHOTOS,
    LINKEDIN,
    OAuthProviderConfig,
    get_provider_config,
    google_photos_config,
    linkedin_config,
)
from .client import OAuthClient

__all__ = [
    "OAuthTokenRecord",
    "TokenState",
    "GOOGLE_PHOTOS",
    "LINKEDIN",
    "OAuthProviderConfig",
    "get_provider_config",
    "google_photos_config",
    "linkedin_config",
    "OAuthClient",
]
