"""Integration tests for the Event Catalog HTTP API.

Run with: pytest tests/test_event_catalog.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest
from django.contrib import admin
from rest_framework.test import APIClient

from events import models

EVENT_PAYLOAD = {
    "title": "Jazz Night",
    "location": {"latitude": "40.7128", "longitude": "-74.006"},
    "date": "2024-06-15T20:00:00Z",
    "description": "Live jazz downtown",
    "categories": ["music", "art"],
    "price": [{"amount": "25.00", "label": "general"}, {"amount": "15.00"}],
    "city": "New York",
    "formatted_address": "1 Main St, New York, NY",
}


def create_event(api_client: APIClient, **overrides) -> dict:
    response = api_client.post("/api/events", {**EVENT_PAYLOAD, **overrides}, format="json")
    assert response.status_code == 201, response.data
    return response.data


@pytest.mark.django_db
class TestEventCreate:
    """Tests for POST /api/events"""

    def test_create_event_returns_stored_event(self, api_client: APIClient):
        data = create_event(api_client)
        assert data["id"]
        assert data["created_at"]
        assert data["categories"] == ["art", "music"]
        assert [tier["amount"] for tier in data["price"]] == ["25.00", "15.00"]
        assert data["participants"] == []

    def test_create_event_defaults_optional_collections(self, api_client: APIClient):
        payload = {
            "title": "Pop-up Market",
            "location": {"latitude": "38.7223", "longitude": "-9.1393"},
        }
        response = api_client.post("/api/events", payload, format="json")
        assert response.status_code == 201
        assert response.data["date"] is None
        assert response.data["categories"] == []
        assert response.data["price"] == []
        assert response.data["flyers"] == []

    def test_create_duplicate_event_conflicts(self, api_client: APIClient):
        create_event(api_client)
        response = api_client.post("/api/events", EVENT_PAYLOAD, format="json")
        assert response.status_code == 409
        assert response.data["code"] == "EVENT_ALREADY_EXISTS"

    def test_create_event_invalid_payload(self, api_client: APIClient):
        payload = {**EVENT_PAYLOAD, "location": {"latitude": "123", "longitude": "0"}}
        response = api_client.post("/api/events", payload, format="json")
        assert response.status_code == 400


@pytest.mark.django_db
class TestEventSearch:
    """Tests for GET /api/events"""

    def test_search_without_criteria_returns_all(self, api_client: APIClient):
        create_event(api_client)
        create_event(api_client, title="Poetry Slam", date="2024-06-20T19:00:00Z")
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert len(response.data) == 2

    def test_search_by_category_and_price(self, api_client: APIClient):
        create_event(api_client)
        create_event(
            api_client,
            title="Gala",
            date="2024-06-21T19:00:00Z",
            price=[{"amount": "80.00"}],
        )
        response = api_client.get("/api/events", {"category": "music", "price": "20"})
        assert response.status_code == 200
        assert [event["title"] for event in response.data] == ["Gala"]

    def test_search_by_area(self, api_client: APIClient):
        create_event(api_client)
        create_event(
            api_client,
            title="Far away",
            location={"latitude": "48.8566", "longitude": "2.3522"},
        )
        response = api_client.get(
            "/api/events", {"latitude": "40.7", "longitude": "-74", "radius": "0.5"}
        )
        assert [event["title"] for event in response.data] == ["Jazz Night"]

    def test_search_rejects_non_numeric_radius(self, api_client: APIClient):
        response = api_client.get(
            "/api/events", {"latitude": "40.7", "longitude": "-74", "radius": "wide"}
        )
        assert response.status_code == 400


@pytest.mark.django_db
class TestEventReadPatterns:
    """Tests for the city, category, name and main listings."""

    def test_list_by_city(self, api_client: APIClient):
        create_event(api_client)
        response = api_client.get("/api/events/city/New%20York")
        assert [event["title"] for event in response.data] == ["Jazz Night"]

    def test_list_by_category(self, api_client: APIClient):
        create_event(api_client)
        assert len(api_client.get("/api/events/category/art").data) == 1
        assert api_client.get("/api/events/category/sports").data == []

    def test_list_by_name(self, api_client: APIClient):
        create_event(api_client)
        assert len(api_client.get("/api/events/name/JAZZ").data) == 1

    def test_main_events_for_date(self, api_client: APIClient):
        create_event(api_client)
        create_event(api_client, title="Much later", date="2024-09-01T20:00:00Z")
        response = api_client.get("/api/events/main", {"date": "2024-06-01T00:00:00Z"})
        assert response.status_code == 200
        assert [event["title"] for event in response.data] == ["Jazz Night"]

    def test_main_events_default_to_now(self, api_client: APIClient):
        soon = datetime.now(timezone.utc) + timedelta(days=2)
        create_event(api_client, date=soon.isoformat())
        response = api_client.get("/api/events/main")
        assert len(response.data) == 1


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient):
        created = create_event(api_client)
        response = api_client.get(f"/api/events/{created['id']}")
        assert response.status_code == 200
        assert response.data["title"] == "Jazz Night"
        assert response.data["location"] == {
            "latitude": "40.712800",
            "longitude": "-74.006000",
        }

    def test_get_event_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.get("/api/events/12345678-1234-5678-1234-567812345678")
        assert response.status_code == 404
        assert response.data == {"code": "EVENT_NOT_FOUND", "message": "Event not found"}

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        """Given invalid UUID, returns 400."""
        response = api_client.get("/api/events/not-a-uuid")
        assert response.status_code == 400
        assert response.data["code"] == "INVALID_EVENT_ID"


@pytest.mark.django_db
class TestParticipants:
    """Tests for POST /api/events/{id}/participants"""

    def test_add_participant(self, api_client: APIClient):
        created = create_event(api_client)
        url = f"/api/events/{created['id']}/participants"
        response = api_client.post(url, {"user_id": "user-7"}, format="json")
        assert response.status_code == 200
        assert response.data["participants"] == ["user-7"]

    def test_add_participant_twice_conflicts(self, api_client: APIClient):
        created = create_event(api_client)
        url = f"/api/events/{created['id']}/participants"
        api_client.post(url, {"user_id": "user-7"}, format="json")
        response = api_client.post(url, {"user_id": "user-7"}, format="json")
        assert response.status_code == 409


def test_admin_registers_event_models():
    assert admin.site.is_registered(models.Event)
    assert admin.site.is_registered(models.EventCategory)
