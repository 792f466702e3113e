# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides sample feeds and a client factory backed by a mock upstream
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds the application at import time from the environment

os.environ.setdefault("APP_SECRET", "test-secret")
os.environ.setdefault("APP_ENV", "production")
os.environ.setdefault("ALLOWED_HOST", "rsshub.app")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.services.feed_fetcher import FeedFetcher


TEST_SECRET = "test-secret"
AUTH_HEADERS = {"X-Auth-Key": TEST_SECRET}

SAMPLE_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example Feed</title>
    <link>https://rsshub.app/example/feed</link>
    <description>An example feed</description>
    <item>
      <title>First post</title>
      <link>https://example.com/posts/1</link>
      <guid>https://example.com/posts/1</guid>
      <pubDate>Mon, 06 Sep 2021 16:45:00 GMT</pubDate>
      <description>Hello world</description>
    </item>
    <item>
      <title>Second post</title>
      <link>https://example.com/posts/2</link>
      <guid>https://example.com/posts/2</guid>
      <pubDate>Tue, 07 Sep 2021 08:00:00 GMT</pubDate>
      <description>Another entry</description>
    </item>
  </channel>
</rss>
"""

SAMPLE_ATOM = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Atom Example</title>
  <link href="https://rsshub.app/atom/example"/>
  <updated>2024-01-15T10:00:00Z</updated>
  <id>urn:uuid:60a76c80-d399-11d9-b93c-0003939e0af6</id>
  <entry>
    <title>Atom entry</title>
    <link href="https://example.com/atom/1"/>
    <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
    <updated>2024-01-15T10:00:00Z</updated>
    <summary>Short summary</summary>
  </entry>
</feed>
"""


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Production-mode settings with a known secret."""
    return Settings(
        _env_file=None,
        APP_SECRET=TEST_SECRET,
        APP_ENV="production",
        ALLOWED_HOST="rsshub.app",
    )


@pytest.fixture
def dev_settings():
    """Development-mode settings (authentication disabled)."""
    return Settings(_env_file=None, APP_SECRET=TEST_SECRET, APP_ENV="development")


@pytest.fixture
def rss_feed():
    """A well-formed RSS 2.0 feed with two items."""
    return SAMPLE_RSS


@pytest.fixture
def atom_feed():
    """A well-formed Atom 1.0 feed with one entry."""
    return SAMPLE_ATOM


@pytest.fixture
def upstream_requests():
    """Requests seen by the mock upstream, in order."""
    return []


@pytest.fixture
def feed_upstream(upstream_requests):
    """Mock upstream handler serving the sample RSS feed."""
    def handler(request: httpx.Request) -> httpx.Response:
        upstream_requests.append(request)
        return httpx.Response(200, content=SAMPLE_RSS, headers={"Content-Type": "application/rss+xml"})
    return handler


@pytest.fixture
def make_client(test_settings):
    """
    Build a TestClient whose outbound fetches go to a mock handler.

    Usage:
        client = make_client(handler)
        client = make_client(handler, settings=dev_settings)
    """
    def _make(handler, settings=None):
        fetcher = FeedFetcher(transport=httpx.MockTransport(handler))
        return TestClient(create_app(settings or test_settings, fetcher))
    return _make


@pytest.fixture
def client(make_client, feed_upstream):
    """Client for a production-mode app backed by the sample RSS feed."""
    return make_client(feed_upstream)


@pytest.fixture
def auth_headers():
    """Headers carrying the valid shared secret."""
    return dict(AUTH_HEADERS)
