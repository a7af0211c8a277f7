"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from events.handlers.views import event_detail_cache_key
from events.models import Event, EventCategory, PriceTier


@pytest.fixture
def event_record(db) -> Event:
    return Event.objects.create(
        title="Jazz Night", latitude="40.712800", longitude="-74.006000"
    )


@pytest.mark.django_db
class TestDetailCache:
    """Tests for the event detail response cache."""

    def test_detail_response_is_cached(self, api_client: APIClient, event_record):
        api_client.get(f"/api/events/{event_record.pk}")
        assert cache.get(event_detail_cache_key(str(event_record.pk)))["title"] == (
            "Jazz Night"
        )

    def test_detail_served_from_cache(self, api_client: APIClient, event_record):
        key = event_detail_cache_key(str(event_record.pk))
        cache.set(key, {"title": "Cached"})
        response = api_client.get(f"/api/events/{event_record.pk}")
        assert response.data == {"title": "Cached"}

    def test_not_found_is_not_cached(self, api_client: APIClient):
        missing = "12345678-1234-5678-1234-567812345678"
        api_client.get(f"/api/events/{missing}")
        assert cache.get(event_detail_cache_key(missing)) is None


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_detail_cache(self, event_record):
        """Saving an event invalidates the events:{id} cache key."""
        key = event_detail_cache_key(str(event_record.pk))
        cache.set(key, {"title": "stale"})
        event_record.title = "Jazz Night II"
        event_record.save()
        assert cache.get(key) is None

    def test_price_tier_save_invalidates_detail_cache(self, event_record):
        """Saving a price tier invalidates its event's cache key."""
        key = event_detail_cache_key(str(event_record.pk))
        cache.set(key, {"title": "stale"})
        PriceTier.objects.create(event=event_record, position=0, amount="10.00")
        assert cache.get(key) is None

    def test_category_delete_invalidates_detail_cache(self, event_record):
        """Deleting a category tag invalidates its event's cache key."""
        tag = EventCategory.objects.create(event=event_record, name="music")
        key = event_detail_cache_key(str(event_record.pk))
        cache.set(key, {"title": "stale"})
        tag.delete()
        assert cache.get(key) is None

    def test_participant_added_over_api_refreshes_detail(
        self, api_client: APIClient, event_record
    ):
        url = f"/api/events/{event_record.pk}"
        api_client.get(url)
        api_client.post(f"{url}/participants", {"user_id": "user-1"}, format="json")
        assert api_client.get(url).data["participants"] == ["user-1"]

    def test_non_canonical_id_shares_invalidated_cache(
        self, api_client: APIClient, event_record
    ):
        """Upper-case and hyphen-less ids read the same cache entry signals clear."""
        upper = f"/api/events/{str(event_record.pk).upper()}"
        api_client.get(upper)
        api_client.post(
            f"/api/events/{event_record.pk}/participants",
            {"user_id": "user-1"},
            format="json",
        )
        assert api_client.get(upper).data["participants"] == ["user-1"]
        compact = api_client.get(f"/api/events/{event_record.pk.hex}")
        assert compact.data["participants"] == ["user-1"]
