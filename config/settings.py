"""Configuration management using pydantic-settings."""
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Site identity
    environment: str = "development"
    site_name: str = "Raju Bhupatiraju"
    site_description: str = "Enterprise Applications Leader & Bird Photographer"
    site_url: Optional[str] = None
    linkedin_profile: str = "https://www.linkedin.com/in/rajubhupatiraju"
    profile_photo_url: str = (
        "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d"
        "?w=300&h=300&fit=crop&crop=face"
    )

    # External JSON feed with the canonical profile shape
    profile_json_url: Optional[str] = None

    # LinkedIn OAuth (optional)
    linkedin_client_id: Optional[str] = None
    linkedin_client_secret: Optional[str] = None
    linkedin_redirect_uri: Optional[str] = None

    # Google Photos OAuth (optional, album tier only runs when a title is set)
    google_photos_client_id: Optional[str] = None
    google_photos_client_secret: Optional[str] = None
    google_photos_redirect_uri: Optional[str] = None
    google_photos_album_title: Optional[str] = None

    # GitHub photo repository
    github_username: str = "tinkeran"
    github_photos_repo: str = "raju-bhupatiraju-portfolio"
    github_photos_path: str = "public/photos"
    github_photos_metadata_path: str = "data/photos-metadata.json"
    github_photos_branch: str = "main"

    # Cache settings
    cache_backend: str = "sql"  # "sql" or "memory"
    cache_database_url: str = "sqlite:///./portfolio_cache.db"
    profile_cache_ttl_seconds: int = 24 * 60 * 60
    photos_cache_ttl_seconds: int = 60 * 60

    # Outbound requests
    request_timeout_seconds: float = 5.0

    # Tokens within this many seconds of expiry are treated as expired
    token_expiry_skew_seconds: int = 300

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def base_url(self) -> str:
        """Public base URL used to build default OAuth redirect URIs."""
        return (self.site_url or "http://localhost:8000").rstrip("/")


settings = Settings()
