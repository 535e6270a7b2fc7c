"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from events import models
from events.handlers.views import event_cache_key
from events.services import get_event_service


@pytest.fixture
def stored_event(event_payload):
    return get_event_service().create_event(event_payload)


@pytest.fixture
def cache_enabled(settings):
    settings.EVENTS_CACHE_TIMEOUT = 300


@pytest.mark.django_db
class TestCacheDisabledByDefault:
    """With the default timeout of 0 every lookup reads storage."""

    def test_default_timeout_is_off(self, settings):
        assert settings.EVENTS_CACHE_TIMEOUT == 0

    def test_write_bypassing_signals_is_visible(self, api_client, stored_event):
        """A bulk update sends no signals but the next GET still sees it."""
        api_client.get("/api/events/my-event-2025")

        models.Event.objects.filter(slug="my-event-2025").update(venue="Side Hall")

        response = api_client.get("/api/events/my-event-2025")
        assert response.json()["data"]["venue"] == "Side Hall"
        assert cache.get(event_cache_key("my-event-2025")) is None


@pytest.mark.django_db
@pytest.mark.usefixtures("cache_enabled")
class TestDetailCache:
    """Tests for caching of detail responses."""

    def test_successful_lookup_is_cached(self, api_client, stored_event):
        api_client.get("/api/events/my-event-2025")

        cached = cache.get(event_cache_key("my-event-2025"))
        assert cached["title"] == "My Event 2025"

    def test_not_found_is_not_cached(self, api_client):
        api_client.get("/api/events/missing-event")

        assert cache.get(event_cache_key("missing-event")) is None

    def test_cached_payload_is_served(self, api_client, stored_event):
        cache.set(event_cache_key("my-event-2025"), {"title": "From cache"})

        response = api_client.get("/api/events/my-event-2025")

        assert response.json()["data"] == {"title": "From cache"}


@pytest.mark.django_db
@pytest.mark.usefixtures("cache_enabled")
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_detail_cache(self, api_client, stored_event):
        """Saving an event invalidates the events:{slug} cache key."""
        api_client.get("/api/events/my-event-2025")

        get_event_service().update_event("my-event-2025", {"venue": "Side Hall"})

        assert cache.get(event_cache_key("my-event-2025")) is None
        response = api_client.get("/api/events/my-event-2025")
        assert response.json()["data"]["venue"] == "Side Hall"

    def test_title_change_invalidates_previous_slug(self, api_client, stored_event):
        """Renaming an event drops the cache entry under its old slug."""
        api_client.get("/api/events/my-event-2025")

        get_event_service().update_event("my-event-2025", {"title": "Renamed"})

        assert cache.get(event_cache_key("my-event-2025")) is None
        assert api_client.get("/api/events/my-event-2025").status_code == 404
        assert api_client.get("/api/events/renamed").status_code == 200

    def test_event_delete_invalidates_detail_cache(self, api_client, stored_event):
        api_client.get("/api/events/my-event-2025")

        models.Event.objects.get(slug="my-event-2025").delete()

        assert cache.get(event_cache_key("my-event-2025")) is None
        assert api_client.get("/api/events/my-event-2025").status_code == 404
