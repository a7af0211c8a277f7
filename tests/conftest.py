"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from events.domain import EventDraft, Location, PriceTier
from events.stores.memory_store import InMemoryEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_draft():
    """Factory for event drafts with sensible defaults."""

    def _make_draft(**overrides) -> EventDraft:
        values = {
            "title": "Jazz Night",
            "location": Location(Decimal("40.7128"), Decimal("-74.006")),
            "date": datetime(2024, 6, 15, 20, 0, tzinfo=timezone.utc),
            "description": "Live jazz downtown",
            "categories": frozenset({"music"}),
            "banner": "banners/jazz.png",
            "flyers": frozenset({"flyers/jazz-1.png"}),
            "coupons": frozenset(),
            "price": (PriceTier(Decimal("25.00"), "general"),),
            "city": "New York",
            "formatted_address": "1 Main St, New York, NY",
        }
        values.update(overrides)
        return EventDraft(**values)

    return _make_draft


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def django_store(db):
    from events import models
    from events.stores.django_store import DjangoEventStore

    return DjangoEventStore(models.Event)


@pytest.fixture(params=["memory", "django"])
def store(request):
    """Each store implementation, for contract tests."""
    return request.getfixturevalue(f"{request.param}_store")
