"""
OAuth token records and their lifecycle states.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from portfolio.errors import ParseError


class TokenState(Enum):
    """Lifecycle state of a provider's cached token."""
    UNAUTHENTICATED = "unauthenticated"
    AUTHORIZED = "authorized"
    EXPIRED = "expired"


@dataclass
class OAuthTokenRecord:
    """Access token persisted in the cache store."""
    access_token: str
    expires_at_ms: int
    scope: str = ""
    token_type: str = "Bearer"
    refresh_token: Optional[str] = None

    def is_expired(self, current_ms: int, skew_ms: int) -> bool:
        """True once we are within skew_ms of the expiry time."""
        return current_ms > self.expires_at_ms - skew_ms

    @classmethod
    def from_token_response(
        cls,
        response: Dict[str, Any],
        current_ms: int,
        previous_refresh_token: Optional[str] = None,
    ) -> "OAuthTokenRecord":
        """
        Build a record from a token endpoint reply.

        A refresh reply that omits refresh_token keeps the previous one.

        Raises:
            ParseError: If access_token is missing
        """
        if not isinstance(response, dict) or not response.get("access_token"):
            raise ParseError("token response has no access_token")
        try:
            expires_in = int(response.get("expires_in") or 0)
        except (TypeError, ValueError) as e:
            raise ParseError(f"token response has bad expires_in: {e}") from e
        return cls(
            access_token=response["access_token"],
            expires_at_ms=current_ms + expires_in * 1000,
            scope=response.get("scope") or "",
            token_type=response.get("token_type") or "Bearer",
            refresh_token=response.get("refresh_token") or previous_refresh_token,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "access_token": self.access_token,
            "expires_at": self.expires_at_ms,
            "refresh_token": self.refresh_token,
            "scope": self.scope,
            "token_type": self.token_type,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OAuthTokenRecord":
        """Raises KeyError/ValueError/TypeError on a malformed record."""
        return cls(
            access_token=data["access_token"],
            expires_at_ms=int(data["expires_at"]),
            scope=data.get("scope") or "",
            token_type=data.get("token_type") or "Bearer",
            refresh_token=data.get("refresh_token"),
        )
