"""
Portfolio site - Main FastAPI Application
Resume and photo data resolved through tiered sources behind a TTL cache
"""
import logging
from datetime import datetime, timezone
from typing import Optional

import requests
from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from portfolio import views
from portfolio.cache import CacheStore, build_cache_store
from portfolio.errors import CacheError, OAuthNotConfigured
from portfolio.oauth import GOOGLE_PHOTOS, LINKEDIN
from portfolio.schemas import (
    ApiResponse,
    LikeCount,
    MessageResponse,
    OAuthProviderStatus,
    OAuthStatusResponse,
)
from portfolio.services import PortfolioService, UnknownProvider

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("main")

# Version tracking
APP_VERSION = "v1.0.0"
APP_NAME = "Portfolio"

app = FastAPI(
    title=f"{settings.site_name} {APP_NAME}",
    description=settings.site_description,
    version=APP_VERSION,
)

PROVIDER_NAMES = {
    LINKEDIN: "LinkedIn",
    GOOGLE_PHOTOS: "Google Photos",
}

# Shared handles; all durable state lives in the store itself
_cache_store: Optional[CacheStore] = None
_http_session = requests.Session()


def get_cache_store() -> CacheStore:
    """Get or create the process-wide cache store handle."""
    global _cache_store
    if _cache_store is None:
        _cache_store = build_cache_store(settings.cache_backend, settings.cache_database_url)
    return _cache_store


def get_service() -> PortfolioService:
    """Per-request service - use in FastAPI dependencies."""
    return PortfolioService(settings, get_cache_store(), session=_http_session)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTML 404 for pages, JSON for everything else."""
    if exc.status_code == 404 and not request.url.path.startswith("/api"):
        return HTMLResponse(content=views.render_not_found(), status_code=404)
    return JSONResponse(
        content=ApiResponse.fail(str(exc.detail)).model_dump(exclude_none=True),
        status_code=exc.status_code,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        content={"success": False, "error": "Internal server error"},
        status_code=500,
    )


# =============================================================================
# SERVICE ENDPOINTS
# =============================================================================

@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "portfolio",
        "environment": settings.environment,
    }


@app.get("/version")
def version_info():
    """Version information endpoint."""
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "full": f"{APP_NAME} {APP_VERSION}",
    }


# =============================================================================
# JSON API
# =============================================================================

@app.get("/api/profile", response_model=ApiResponse, response_model_exclude_none=True)
def api_profile(service: PortfolioService = Depends(get_service)):
    """Resume profile with cache metadata and the tier that produced it."""
    profile, meta = service.resolve_profile()
    return ApiResponse.ok(profile.to_dict(), meta)


@app.post("/api/profile/refresh-cache", response_model=MessageResponse, response_model_exclude_none=True)
def refresh_profile_cache(service: PortfolioService = Depends(get_service)):
    """Clear cached profile and LinkedIn token so feed changes show immediately."""
    service.clear_profile_cache()
    service.clear_oauth_token(LINKEDIN)
    return MessageResponse(success=True, message="Profile and token cache cleared")


@app.get("/api/photos", response_model=ApiResponse, response_model_exclude_none=True)
def api_photos(service: PortfolioService = Depends(get_service)):
    """Gallery photos in source order."""
    photos, meta = service.resolve_photos()
    return ApiResponse.ok([p.to_dict() for p in photos], meta)


@app.get("/api/photos/clear-cache", response_model=MessageResponse, response_model_exclude_none=True)
def clear_photos_cache(service: PortfolioService = Depends(get_service)):
    service.clear_photo_cache()
    return MessageResponse(success=True, message="Photos cache cleared successfully")


@app.get("/api/projects", response_model=ApiResponse, response_model_exclude_none=True)
def api_projects(service: PortfolioService = Depends(get_service)):
    return ApiResponse.ok([p.to_dict() for p in service.get_projects()])


@app.get("/api/likes")
def api_all_likes(service: PortfolioService = Depends(get_service)):
    """Like counts for every photo currently in the gallery."""
    return service.get_all_likes()


@app.get("/api/likes/{photo_id}", response_model=LikeCount)
def api_get_likes(photo_id: str, service: PortfolioService = Depends(get_service)):
    try:
        return LikeCount(photoId=photo_id, likes=service.get_likes(photo_id))
    except CacheError as e:
        logger.error(f"Like count read failed: {e}")
        return JSONResponse(content={"error": "Failed to get like count"}, status_code=500)


@app.post("/api/likes/{photo_id}", response_model=LikeCount)
def api_add_like(photo_id: str, service: PortfolioService = Depends(get_service)):
    try:
        return LikeCount(photoId=photo_id, likes=service.add_like(photo_id))
    except CacheError as e:
        logger.error(f"Like count update failed: {e}")
        return JSONResponse(content={"error": "Failed to update like count"}, status_code=500)


@app.get("/api/oauth/status", response_model=OAuthStatusResponse)
def api_oauth_status(service: PortfolioService = Depends(get_service)):
    """Which providers are configured and whether a usable token is cached."""
    providers = {
        name: OAuthProviderStatus(**status)
        for name, status in service.oauth_status().items()
    }
    return OAuthStatusResponse(providers=providers)


# =============================================================================
# OAUTH FLOW
# =============================================================================

@app.get("/auth/{provider}")
def auth_begin(provider: str, service: PortfolioService = Depends(get_service)):
    """Redirect to the provider's consent page."""
    try:
        return RedirectResponse(url=service.begin_oauth(provider), status_code=302)
    except UnknownProvider:
        return _not_found_page()
    except OAuthNotConfigured:
        name = PROVIDER_NAMES[provider]
        prefix = "LINKEDIN" if provider == LINKEDIN else "GOOGLE_PHOTOS"
        return JSONResponse(
            content=ApiResponse.fail(
                f"{name} OAuth not configured. Please set {prefix}_CLIENT_ID "
                f"and {prefix}_CLIENT_SECRET."
            ).model_dump(exclude_none=True),
            status_code=400,
        )


@app.get("/auth/{provider}/callback", response_class=HTMLResponse)
def auth_callback(
    provider: str,
    code: Optional[str] = Query(None),
    error: Optional[str] = Query(None),
    error_description: Optional[str] = Query(None),
    service: PortfolioService = Depends(get_service),
):
    """Finish the authorization-code flow and report the result."""
    if provider not in PROVIDER_NAMES:
        return _not_found_page()
    name = PROVIDER_NAMES[provider]

    if error:
        message = f"{name} returned an error: {error_description or error}"
        return HTMLResponse(views.render_oauth_result(name, False, message), status_code=400)
    if not code:
        message = "No authorization code received."
        return HTMLResponse(views.render_oauth_result(name, False, message), status_code=400)

    result = service.complete_oauth(provider, code)
    if not result.success:
        return HTMLResponse(views.render_oauth_result(name, False, result.error), status_code=500)

    message = f"Your site will now use data from {name}."
    return HTMLResponse(views.render_oauth_result(name, True, message))


def _not_found_page() -> HTMLResponse:
    return HTMLResponse(content=views.render_not_found(), status_code=404)


# =============================================================================
# PAGES
# =============================================================================

@app.get("/", response_class=HTMLResponse)
def home(service: PortfolioService = Depends(get_service)):
    """Landing page with profile summary and projects."""
    profile, _ = service.resolve_profile()
    return HTMLResponse(views.render_home(settings, profile, service.get_projects()))


@app.get("/resume", response_class=HTMLResponse)
def resume(service: PortfolioService = Depends(get_service)):
    profile, meta = service.resolve_profile()
    return HTMLResponse(views.render_resume(settings, profile, meta.source))


@app.get("/photography", response_class=HTMLResponse)
def photography(service: PortfolioService = Depends(get_service)):
    photos, _ = service.resolve_photos()
    return HTMLResponse(views.render_photography(settings, photos, service.get_all_likes()))


@app.get("/projects")
def projects_page():
    return RedirectResponse(url="/#projects", status_code=302)
