"""
Tests for profile models, LinkedIn mapping and tiered profile resolution.
"""
import json

import pytest
import requests

from portfolio.oauth import OAuthClient, OAuthTokenRecord, linkedin_config
from portfolio.profile import (
    ProfileResolver,
    ResolvedProfile,
    get_baseline_profile,
    merge_over_baseline,
)
from portfolio.profile.linkedin import localized_string, transform_linkedin_profile
from portfolio.services import PortfolioService
from portfolio.sources import SourceTag

from conftest import FakeResponse

FEED_URL = "https://feeds.example.com/profile.json"
LINKEDIN_API = "https://api.linkedin.com/v2/people"


@pytest.fixture
def linkedin_settings(make_settings):
    return make_settings(linkedin_client_id="id", linkedin_client_secret="secret")


def store_linkedin_token(store, clock, expires_in_s=3600):
    record = OAuthTokenRecord(access_token="li-token", expires_at_ms=clock.now + expires_in_s * 1000)
    store.put("linkedin_access_token", json.dumps(record.to_dict()))


def make_resolver(settings, store, session, clock):
    oauth = OAuthClient(linkedin_config(settings), store, session=session, clock=clock)
    return ProfileResolver(settings, oauth, session=session)


# =============================================================================
# Models
# =============================================================================

class TestProfileModels:

    def test_baseline_contents(self):
        profile = get_baseline_profile()

        assert profile.full_name == "Raju Bhupatiraju"
        assert len(profile.experience) == 3
        assert len(profile.education) == 2
        assert len(profile.skills) == 12
        assert len(profile.certifications) == 2
        assert profile.experience[0].current is True

    def test_baseline_is_a_fresh_copy(self):
        first = get_baseline_profile()
        first.skills.append("Juggling")

        assert "Juggling" not in get_baseline_profile().skills

    def test_from_dict_tolerates_missing_and_null_fields(self):
        profile = ResolvedProfile.from_dict({"firstName": "A", "skills": None, "experience": "x"})

        assert profile.first_name == "A"
        assert profile.last_name == ""
        assert profile.skills == []
        assert profile.experience == []

    def test_from_dict_rejects_non_objects(self):
        with pytest.raises(TypeError):
            ResolvedProfile.from_dict(["not", "a", "profile"])

    def test_dict_round_trip(self):
        profile = get_baseline_profile()
        assert ResolvedProfile.from_dict(profile.to_dict()) == profile

    def test_merge_keeps_baseline_for_empty_fields(self):
        baseline = get_baseline_profile()
        merged = merge_over_baseline(
            ResolvedProfile(first_name="A", last_name="B", skills=["X"]), baseline
        )

        assert merged.full_name == "A B"
        assert merged.skills == ["X"]
        assert merged.headline == baseline.headline
        assert merged.experience == baseline.experience
        assert merged.certifications == baseline.certifications


class TestLinkedInMapping:

    def test_localized_string_prefers_locale(self):
        value = {
            "localized": {"fr_FR": "Bonjour", "en_US": "Hello"},
            "preferredLocale": {"language": "en", "country": "US"},
        }
        assert localized_string(value) == "Hello"

    def test_localized_string_falls_back_to_first_locale(self):
        assert localized_string({"localized": {"de_DE": "Hallo"}}) == "Hallo"
        assert localized_string(None) == ""
        assert localized_string({"localized": {}}) == ""

    def test_transform(self):
        raw = {
            "firstName": {"localized": {"en_US": "Raju"}},
            "lastName": {"localized": {"en_US": "B"}},
            "headline": {"localized": {"en_US": "Leader"}},
            "location": {"name": "Austin"},
        }

        profile = transform_linkedin_profile(raw, "https://img.example.com/me.jpg")

        assert profile.full_name == "Raju B"
        assert profile.headline == "Leader"
        assert profile.location == "Austin"
        assert profile.profile_picture == "https://img.example.com/me.jpg"
        assert profile.experience == []


# =============================================================================
# Resolution
# =============================================================================

class TestProfileResolver:
    """OAuth, then external feed, then baseline."""

    def test_nothing_configured_uses_baseline(self, settings, store, session, clock):
        result = make_resolver(settings, store, session, clock).resolve()

        assert result.source == SourceTag.STATIC_FALLBACK
        assert result.value.first_name == "Raju"
        assert len(result.value.skills) == 12
        assert session.calls == []

    def test_feed_is_merged_over_baseline(self, make_settings, store, session, clock):
        settings = make_settings(profile_json_url=FEED_URL)
        session.add("GET", FEED_URL, FakeResponse(payload={
            "firstName": "A", "lastName": "B", "skills": ["X"],
        }))

        result = make_resolver(settings, store, session, clock).resolve()

        assert result.source == SourceTag.EXTERNAL_FEED
        assert result.value.full_name == "A B"
        assert result.value.skills == ["X"]
        assert result.value.experience == get_baseline_profile().experience
        assert result.value.profile_picture == settings.profile_photo_url
        assert session.calls[0]["headers"]["Cache-Control"] == "no-cache"

    @pytest.mark.parametrize("response", [
        FakeResponse(500, text="boom"),
        FakeResponse(200, text="not json"),
        FakeResponse(200, payload=["a", "list"]),
    ])
    def test_broken_feed_falls_back(self, make_settings, store, session, clock, response):
        settings = make_settings(profile_json_url=FEED_URL)
        session.add("GET", FEED_URL, response)

        result = make_resolver(settings, store, session, clock).resolve()

        assert result.source == SourceTag.STATIC_FALLBACK

    def test_oauth_without_token_falls_through(self, make_settings, store, session, clock):
        settings = make_settings(
            linkedin_client_id="id", linkedin_client_secret="secret", profile_json_url=FEED_URL
        )
        session.add("GET", FEED_URL, FakeResponse(payload={"firstName": "Feed"}))

        result = make_resolver(settings, store, session, clock).resolve()

        assert result.source == SourceTag.EXTERNAL_FEED
        assert session.calls_to(LINKEDIN_API) == []

    def test_oauth_tier_uses_cached_token(self, linkedin_settings, store, session, clock):
        store_linkedin_token(store, clock)
        session.add("GET", LINKEDIN_API, FakeResponse(payload={
            "firstName": {"localized": {"en_US": "Live"}},
            "lastName": {"localized": {"en_US": "Person"}},
        }))

        result = make_resolver(linkedin_settings, store, session, clock).resolve()

        assert result.source == SourceTag.OAUTH
        assert result.value.full_name == "Live Person"
        assert len(result.value.skills) == 12
        assert session.calls[0]["headers"]["Authorization"] == "Bearer li-token"

    def test_oauth_tier_keeps_baseline_for_empty_fields(
        self, linkedin_settings, store, session, clock, monkeypatch
    ):
        store_linkedin_token(store, clock)
        session.add("GET", LINKEDIN_API, FakeResponse(payload={}))
        monkeypatch.setattr(
            "portfolio.profile.resolver.transform_linkedin_profile",
            lambda raw, picture: ResolvedProfile(first_name="Live", skills=["Go"], experience=[]),
        )

        result = make_resolver(linkedin_settings, store, session, clock).resolve()

        assert result.source == SourceTag.OAUTH
        assert result.value.first_name == "Live"
        assert result.value.skills == ["Go"]
        assert result.value.experience == get_baseline_profile().experience
        assert result.value.education == get_baseline_profile().education

    def test_both_live_tiers_down(self, make_settings, store, session, clock):
        settings = make_settings(
            linkedin_client_id="id", linkedin_client_secret="secret", profile_json_url=FEED_URL
        )
        store_linkedin_token(store, clock)
        session.add("GET", LINKEDIN_API, requests.ConnectionError("unreachable"))
        session.add("GET", FEED_URL, requests.Timeout("slow"))

        result = make_resolver(settings, store, session, clock).resolve()

        assert result.source == SourceTag.STATIC_FALLBACK
        assert result.value == get_baseline_profile(settings.profile_photo_url)
        assert len(session.calls) == 2

    def test_rejected_token_falls_back(self, linkedin_settings, store, session, clock):
        store_linkedin_token(store, clock)
        session.add("GET", LINKEDIN_API, FakeResponse(401, payload={"message": "revoked"}))

        result = make_resolver(linkedin_settings, store, session, clock).resolve()

        assert result.source == SourceTag.STATIC_FALLBACK


class TestProfileService:
    """Profile resolution through the cache."""

    def test_second_read_is_served_from_cache(self, make_settings, store, session, clock):
        settings = make_settings(profile_json_url=FEED_URL)
        session.add("GET", FEED_URL, FakeResponse(payload={"firstName": "A"}))
        service = PortfolioService(settings, store, session=session, clock=clock)

        first, first_meta = service.resolve_profile()
        clock.advance(60)
        second, second_meta = service.resolve_profile()

        assert len(session.calls_to(FEED_URL)) == 1
        assert first_meta.cached is False
        assert second_meta.cached is True
        assert second_meta.source == "external_feed"
        assert second == first

    def test_repeated_reads_are_identical(self, make_settings, store, session, clock):
        settings = make_settings(profile_json_url=FEED_URL)
        session.add("GET", FEED_URL, FakeResponse(payload={"firstName": "A", "skills": ["X"]}))
        service = PortfolioService(settings, store, session=session, clock=clock)

        first, _ = service.resolve_profile()
        second, _ = service.resolve_profile()

        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_expired_cache_re_resolves(self, make_settings, store, session, clock):
        settings = make_settings(profile_json_url=FEED_URL, profile_cache_ttl_seconds=10)
        session.add("GET", FEED_URL, FakeResponse(payload={"firstName": "A"}))
        service = PortfolioService(settings, store, session=session, clock=clock)

        service.resolve_profile()
        clock.advance(10)
        _, meta = service.resolve_profile()

        assert len(session.calls_to(FEED_URL)) == 2
        assert meta.cached is False

    def test_clear_profile_cache(self, make_settings, store, session, clock):
        settings = make_settings(profile_json_url=FEED_URL)
        session.add("GET", FEED_URL, FakeResponse(payload={"firstName": "A"}))
        service = PortfolioService(settings, store, session=session, clock=clock)

        service.resolve_profile()
        service.clear_profile_cache()
        service.resolve_profile()

        assert len(session.calls_to(FEED_URL)) == 2

    def test_baseline_result_is_cached(self, settings, store, session, clock):
        service = PortfolioService(settings, store, session=session, clock=clock)

        service.resolve_profile()
        profile, meta = service.resolve_profile()

        assert meta.cached is True
        assert meta.source == "static_fallback"
        assert profile.full_name == "Raju Bhupatiraju"
