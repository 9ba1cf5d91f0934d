"""
Pydantic schemas for API responses
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel

from portfolio.cache import CacheMeta


class ApiResponse(BaseModel):
    """Envelope shared by every JSON endpoint"""
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    cached: Optional[bool] = None
    cacheExpiry: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def ok(cls, data: Any, meta: Optional[CacheMeta] = None) -> "ApiResponse":
        if meta is None:
            return cls(success=True, data=data, cached=False)
        return cls(success=True, data=data, **meta.to_dict())

    @classmethod
    def fail(cls, error: str) -> "ApiResponse":
        return cls(success=False, error=error)


class MessageResponse(BaseModel):
    """Result of a cache-clear style action"""
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None


class LikeCount(BaseModel):
    """Like counter for one photo"""
    photoId: str
    likes: int


class OAuthProviderStatus(BaseModel):
    configured: bool
    state: str


class OAuthStatusResponse(BaseModel):
    providers: Dict[str, OAuthProviderStatus]
