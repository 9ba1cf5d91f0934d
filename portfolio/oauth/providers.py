"""
OAuth provider endpoints and per-provider configuration.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from config.settings import Settings

LINKEDIN = "linkedin"
GOOGLE_PHOTOS = "google-photos"


@dataclass
class OAuthProviderConfig:
    """Everything needed to run the authorization-code flow for one provider."""
    name: str
    display_name: str
    client_id: str
    client_secret: str
    redirect_uri: str
    authorize_url: str
    token_url: str
    scopes: List[str]
    token_cache_key: str
    extra_auth_params: Dict[str, str] = field(default_factory=dict)

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)


def linkedin_config(settings: Settings) -> OAuthProviderConfig:
    return OAuthProviderConfig(
        name=LINKEDIN,
        display_name="LinkedIn",
        client_id=settings.linkedin_client_id or "",
        client_secret=settings.linkedin_client_secret or "",
        redirect_uri=settings.linkedin_redirect_uri or f"{settings.base_url}/auth/linkedin/callback",
        authorize_url="https://www.linkedin.com/oauth/v2/authorization",
        token_url="https://www.linkedin.com/oauth/v2/accessToken",
        scopes=["r_liteprofile", "r_emailaddress", "w_member_social"],
        token_cache_key="linkedin_access_token",
    )


def google_photos_config(settings: Settings) -> OAuthProviderConfig:
    return OAuthProviderConfig(
        name=GOOGLE_PHOTOS,
        display_name="Google Photos",
        client_id=settings.google_photos_client_id or "",
        client_secret=settings.google_photos_client_secret or "",
        redirect_uri=(
            settings.google_photos_redirect_uri
            or f"{settings.base_url}/auth/google-photos/callback"
        ),
        authorize_url="https://accounts.google.com/o/oauth2/v2/auth",
        token_url="https://oauth2.googleapis.com/token",
        scopes=[
            "https://www.googleapis.com/auth/photoslibrary.readonly",
            "https://www.googleapis.com/auth/photoslibrary.sharing",
        ],
        token_cache_key="google_photos_access_token",
        extra_auth_params={"access_type": "offline", "prompt": "consent"},
    )


PROVIDER_BUILDERS = {
    LINKEDIN: linkedin_config,
    GOOGLE_PHOTOS: google_photos_config,
}


def get_provider_config(name: str, settings: Settings) -> Optional[OAuthProviderConfig]:
    """Config for a provider name, or None for an unknown provider."""
    builder = PROVIDER_BUILDERS.get(name)
    return builder(settings) if builder else None
