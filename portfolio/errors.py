"""
Exception hierarchy for source resolution, caching and OAuth.

Tier errors never cross the resolver boundary: they are caught and logged
by the tier combinator, which then moves on to the next tier.
"""


class PortfolioError(Exception):
    """Base class for all portfolio errors."""
    pass


# ============================================================================
# Tier errors (non-fatal, cause fallthrough)
# ============================================================================

class TierError(PortfolioError):
    """A single source tier could not produce a result."""
    pass


class TransportError(TierError):
    """Network, DNS, timeout or non-2xx response from an external source."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class AuthError(TierError):
    """Missing, invalid or expired credentials for a tier."""
    pass


class ParseError(TierError):
    """Malformed response body from an external source."""
    pass


class NotConfigured(TierError):
    """The tier has no configuration and is skipped."""
    pass


# ============================================================================
# Cache and resolution errors
# ============================================================================

class CacheError(PortfolioError):
    """Cache store read, write or delete failure."""
    pass


class ResolutionFailed(PortfolioError):
    """Every tier failed, including the static one."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = errors or []


# ============================================================================
# OAuth errors (surfaced to the user)
# ============================================================================

class OAuthError(PortfolioError):
    """The OAuth provider rejected a code exchange or refresh."""
    pass


class OAuthNotConfigured(OAuthError):
    """Client credentials for the provider are not set."""

    def __init__(self, provider: str):
        super().__init__(f"{provider} OAuth is not configured")
        self.provider = provider
