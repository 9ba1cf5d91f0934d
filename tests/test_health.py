"""
API tests: service endpoints, JSON API, OAuth flow and pages
"""
import pytest
from fastapi.testclient import TestClient

from portfolio.main import app, get_service
from portfolio.services import PortfolioService

from conftest import FakeResponse


@pytest.fixture
def make_client(store, session, clock):
    """TestClient whose service uses the given settings and test doubles."""
    def _make(settings, cache_store=None):
        backing = cache_store if cache_store is not None else store
        app.dependency_overrides[get_service] = lambda: PortfolioService(
            settings, backing, session=session, clock=clock
        )
        return TestClient(app)
    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, settings):
    return make_client(settings)


@pytest.fixture
def oauth_client(make_client, make_settings):
    return make_client(make_settings(linkedin_client_id="id", linkedin_client_secret="secret"))


# =============================================================================
# Service endpoints
# =============================================================================

def test_health_endpoint_returns_200(client):
    """Test that /health returns HTTP 200"""
    response = client.get("/health")
    assert response.status_code == 200


def test_health_endpoint_returns_healthy_status(client):
    """Test that /health returns status: healthy"""
    data = client.get("/health").json()
    assert data["status"] == "healthy"
    assert "timestamp" in data


def test_version_endpoint(client):
    data = client.get("/version").json()
    assert data["full"] == f"{data['name']} {data['version']}"


# =============================================================================
# JSON API
# =============================================================================

def test_profile_falls_back_to_baseline(client):
    """With no sources configured the baseline profile is served"""
    body = client.get("/api/profile").json()

    assert body["success"] is True
    assert body["source"] == "static_fallback"
    assert body["cached"] is False
    assert body["cacheExpiry"].endswith("Z")
    assert body["data"]["firstName"] == "Raju"
    assert len(body["data"]["skills"]) == 12


def test_profile_second_request_is_cached(client):
    client.get("/api/profile")
    body = client.get("/api/profile").json()

    assert body["cached"] is True
    assert body["source"] == "static_fallback"


def test_refresh_profile_cache(client, store):
    client.get("/api/profile")

    response = client.post("/api/profile/refresh-cache")

    assert response.json()["success"] is True
    assert store.get("linkedin_profile_data") is None
    assert client.get("/api/profile").json()["cached"] is False


def test_profile_from_feed(make_client, make_settings, session):
    url = "https://feeds.example.com/profile.json"
    session.add("GET", url, FakeResponse(payload={"firstName": "A", "lastName": "B", "skills": ["X"]}))
    client = make_client(make_settings(profile_json_url=url))

    body = client.get("/api/profile").json()

    assert body["source"] == "external_feed"
    assert body["data"]["skills"] == ["X"]
    assert len(body["data"]["experience"]) == 3


def test_photos_fall_back_to_samples(client):
    body = client.get("/api/photos").json()

    assert body["success"] is True
    assert body["source"] == "sample_set"
    assert len(body["data"]) == 6
    assert body["data"][0]["id"] == "fallback-1"


def test_clear_photos_cache(client, store):
    client.get("/api/photos")

    response = client.get("/api/photos/clear-cache")

    assert response.json() == {"success": True, "message": "Photos cache cleared successfully"}
    assert store.get("github_photos_cache") is None


def test_projects(client):
    body = client.get("/api/projects").json()
    assert body["success"] is True
    assert len(body["data"]) == 4


def test_likes(client):
    assert client.get("/api/likes/fallback-1").json() == {"photoId": "fallback-1", "likes": 0}
    client.post("/api/likes/fallback-1")
    response = client.post("/api/likes/fallback-1")

    assert response.json() == {"photoId": "fallback-1", "likes": 2}
    assert client.get("/api/likes").json() == {"fallback-1": 2}


def test_likes_store_failure(make_client, settings, broken_store):
    client = make_client(settings, cache_store=broken_store)

    response = client.post("/api/likes/fallback-1")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update like count"}


def test_oauth_status(oauth_client):
    body = oauth_client.get("/api/oauth/status").json()

    assert body["providers"]["linkedin"] == {"configured": True, "state": "unauthenticated"}
    assert body["providers"]["google-photos"]["configured"] is False


# =============================================================================
# OAuth flow
# =============================================================================

def test_auth_redirects_to_provider(oauth_client):
    response = oauth_client.get("/auth/linkedin", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"].startswith("https://www.linkedin.com/oauth/v2/authorization?")


def test_auth_not_configured(client):
    response = client.get("/auth/linkedin", follow_redirects=False)

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "LINKEDIN_CLIENT_ID" in response.json()["error"]


def test_auth_unknown_provider(client):
    assert client.get("/auth/myspace", follow_redirects=False).status_code == 404


def test_callback_with_provider_error(oauth_client):
    response = oauth_client.get("/auth/linkedin/callback?error=access_denied")

    assert response.status_code == 400
    assert "access_denied" in response.text


def test_callback_without_code(oauth_client):
    assert oauth_client.get("/auth/linkedin/callback").status_code == 400


def test_callback_success(oauth_client, session, store):
    session.add("POST", "https://www.linkedin.com/oauth/v2/accessToken", FakeResponse(payload={
        "access_token": "t", "expires_in": 3600,
    }))

    response = oauth_client.get("/auth/linkedin/callback?code=abc")

    assert response.status_code == 200
    assert "LinkedIn Connected" in response.text
    assert store.get("linkedin_access_token") is not None


def test_callback_exchange_failure(oauth_client, session):
    session.add("POST", "https://www.linkedin.com/oauth/v2/accessToken", FakeResponse(400, payload={}))

    response = oauth_client.get("/auth/linkedin/callback?code=abc")

    assert response.status_code == 500
    assert "Authentication Failed" in response.text


# =============================================================================
# Pages
# =============================================================================

def test_home_endpoint_returns_200(client):
    """Test that / returns HTTP 200"""
    response = client.get("/")
    assert response.status_code == 200
    assert "Raju Bhupatiraju" in response.text


def test_resume_page_shows_source(client):
    response = client.get("/resume")
    assert response.status_code == 200
    assert "static_fallback" in response.text


def test_photography_page(client):
    response = client.get("/photography")
    assert response.status_code == 200
    assert "Northern Cardinal in Winter" in response.text


def test_photography_page_with_numeric_metadata(client, session):
    session.add("GET", "https://api.github.com/repos/", FakeResponse(payload=[{
        "name": "heron.jpg", "type": "file", "sha": "sha-1", "size": 1,
        "download_url": "https://raw.example.com/heron.jpg",
    }]))
    session.add("GET", "https://raw.githubusercontent.com/", FakeResponse(payload=[
        {"filename": "heron.jpg", "title": 2024, "camera": 5},
    ]))

    response = client.get("/photography")

    assert response.status_code == 200
    assert "<h3>2024</h3>" in response.text


def test_projects_redirects_to_home_section(client):
    response = client.get("/projects", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/#projects"


def test_unknown_page_returns_html_404(client):
    response = client.get("/no-such-page")
    assert response.status_code == 404
    assert "Page Not Found" in response.text
