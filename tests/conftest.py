"""
Shared fixtures: fake HTTP session, controllable clock, in-memory store.
"""
import json

import pytest
import requests

from config.settings import Settings
from portfolio.cache import MemoryCacheStore
from portfolio.errors import CacheError


class FakeResponse:
    """Just enough of requests.Response for the api_client helpers."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


class FakeSession:
    """
    Routes requests by URL prefix to canned responses.

    A route value may be a FakeResponse, an exception instance to raise,
    or a list of either consumed in order. Unrouted URLs raise ConnectionError.
    """

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, url_prefix, response):
        self.routes[(method, url_prefix)] = response

    def calls_to(self, url_prefix, method=None):
        return [
            c for c in self.calls
            if c["url"].startswith(url_prefix) and (method is None or c["method"] == method)
        ]

    def _dispatch(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        for (route_method, prefix), response in self.routes.items():
            if route_method == method and url.startswith(prefix):
                if isinstance(response, list):
                    response = response.pop(0) if len(response) > 1 else response[0]
                if isinstance(response, Exception):
                    raise response
                return response
        raise requests.ConnectionError(f"no route for {method} {url}")

    def get(self, url, **kwargs):
        return self._dispatch("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._dispatch("POST", url, **kwargs)


class FakeClock:
    """Callable epoch-ms clock that only moves when told to."""

    def __init__(self, start_ms=1_700_000_000_000):
        self.now = start_ms

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += int(seconds * 1000)


class BrokenStore:
    """Store whose every operation fails."""

    def get(self, key):
        raise CacheError("store unavailable")

    def put(self, key, value):
        raise CacheError("store unavailable")

    def delete(self, key):
        raise CacheError("store unavailable")


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return MemoryCacheStore()


@pytest.fixture
def make_settings():
    """Settings isolated from the environment's .env file."""
    def _make(**overrides):
        values = {"cache_backend": "memory", "site_url": "http://testserver"}
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()
