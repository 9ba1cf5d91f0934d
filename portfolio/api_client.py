"""
HTTP helpers for external sources.

Every call is a single attempt with an explicit timeout. requests exceptions
are translated into tier errors so callers only handle one hierarchy.
"""
import logging
from typing import Any, Dict, Optional

import requests

from portfolio.errors import AuthError, ParseError, TransportError

logger = logging.getLogger("api_client")

DEFAULT_TIMEOUT = 5.0

NO_CACHE_HEADERS = {
    "Accept": "application/json",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


def bearer_headers(access_token: str) -> Dict[str, str]:
    """Authorization headers for a bearer-token API call."""
    return {
        "Authorization": f"Bearer {access_token}",
        "Accept": "application/json",
    }


def _check_status(response: requests.Response, url: str) -> None:
    """Raise the matching tier error for a non-2xx response."""
    if response.ok:
        return
    detail = (response.text or "")[:200]
    if response.status_code in (401, 403):
        raise AuthError(f"{url} rejected credentials ({response.status_code}): {detail}")
    raise TransportError(
        f"{url} returned {response.status_code}: {detail}", status_code=response.status_code
    )


def _parse_json(response: requests.Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"{url} returned malformed JSON: {e}") from e


def get_json(
    session: requests.Session,
    url: str,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """
    GET a JSON document.

    Raises:
        TransportError: Network failure or non-2xx status
        AuthError: 401/403 status
        ParseError: Body is not valid JSON
    """
    try:
        response = session.get(url, headers=headers, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(f"GET {url} failed: {e}") from e
    logger.debug(f"GET {url} -> {response.status_code}")
    _check_status(response, url)
    return _parse_json(response, url)


def post_json(
    session: requests.Session,
    url: str,
    payload: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """POST a JSON body and parse a JSON reply. Raises like get_json."""
    try:
        response = session.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(f"POST {url} failed: {e}") from e
    logger.debug(f"POST {url} -> {response.status_code}")
    _check_status(response, url)
    return _parse_json(response, url)

