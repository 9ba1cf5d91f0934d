"""
LinkedIn profile API: fetch and field-map into ResolvedProfile.
"""
import logging
from typing import Any, Dict, Optional

import requests

from portfolio import api_client
from portfolio.errors import ParseError
from .models import ResolvedProfile

logger = logging.getLogger("sources.linkedin")

LINKEDIN_API_BASE = "https://api.linkedin.com/v2"
PROFILE_PROJECTION = (
    "(id,firstName,lastName,headline,summary,industry,location,"
    "profilePicture(displayImage~:playableStreams))"
)


def fetch_linkedin_profile(
    session: requests.Session,
    access_token: str,
    timeout: float = api_client.DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """
    GET the authenticated member's profile.

    Raises:
        TierError: Transport, auth or parse failure
    """
    url = f"{LINKEDIN_API_BASE}/people/~:{PROFILE_PROJECTION}"
    data = api_client.get_json(
        session, url, headers=api_client.bearer_headers(access_token), timeout=timeout
    )
    if not isinstance(data, dict):
        raise ParseError("LinkedIn profile response is not an object")
    return data


def localized_string(value: Any) -> str:
    """
    Pick the preferred-locale text from a LinkedIn localized field.

    Falls back to the first available locale, then to "".
    """
    if not isinstance(value, dict):
        return ""
    localized = value.get("localized")
    if not isinstance(localized, dict) or not localized:
        return ""
    locale = value.get("preferredLocale") or {"language": "en", "country": "US"}
    key = f"{locale.get('language', 'en')}_{locale.get('country', 'US')}"
    return localized.get(key) or next(iter(localized.values()), "") or ""


def transform_linkedin_profile(
    raw: Dict[str, Any],
    profile_photo_url: Optional[str] = None,
) -> ResolvedProfile:
    """
    Map the LinkedIn v2 profile shape onto ResolvedProfile.

    The v2 lite profile carries no experience, education, skills or
    certifications, so those stay empty and the baseline fills them.
    """
    location = raw.get("location") or {}
    picture = raw.get("profilePicture") or {}
    return ResolvedProfile(
        first_name=localized_string(raw.get("firstName")),
        last_name=localized_string(raw.get("lastName")),
        headline=localized_string(raw.get("headline")),
        summary=raw.get("summary") or "",
        location=location.get("name", "") if isinstance(location, dict) else "",
        industry=raw.get("industry") or "",
        profile_picture=(
            picture.get("displayImage") if isinstance(picture, dict) else None
        ) or profile_photo_url,
    )
