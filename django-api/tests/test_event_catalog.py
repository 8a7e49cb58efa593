"""Integration tests for the public event catalog.

Run with: pytest tests/test_event_catalog.py -v
"""

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from events.cache import EVENT_LIST_KEY, event_detail_key


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events(self, api_client: APIClient, make_db_event):
        make_db_event(name="Summer Fest")
        make_db_event(name="Comedy Hour", category="Comedy")

        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert {event["name"] for event in response.data} == {"Summer Fest", "Comedy Hour"}

    def test_list_events_empty_catalog(self, api_client: APIClient):
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert response.data == []

    def test_filters_by_name_and_category(self, api_client: APIClient, make_db_event):
        make_db_event(name="Summer Fest")
        make_db_event(name="Comedy Hour", category="Comedy")

        assert [e["name"] for e in api_client.get("/api/events", {"q": "summer"}).data] == ["Summer Fest"]
        assert [e["name"] for e in api_client.get("/api/events", {"category": "comedy"}).data] == [
            "Comedy Hour"
        ]

    def test_unfiltered_list_is_cached(self, api_client: APIClient, make_db_event):
        make_db_event()
        api_client.get("/api/events")
        assert cache.get(EVENT_LIST_KEY) is not None

    def test_categories_show_remaining(self, api_client: APIClient, make_db_event):
        make_db_event(categories=(("General", "50.00", 10, 8), ("VIP", "90.00", 5, 7)))

        (event,) = api_client.get("/api/events").data
        remaining = {category["name"]: category["remaining"] for category in event["ticket_categories"]}
        assert remaining == {"General": 2, "VIP": 0}


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, make_db_event):
        event = make_db_event()
        response = api_client.get(f"/api/events/{event.id}")

        assert response.status_code == 200
        assert response.data["name"] == "Summer Fest"
        assert response.data["ticket_categories"][0]["price"] == "75.00"
        assert cache.get(event_detail_key(str(event.id))) is not None

    def test_get_event_not_found(self, api_client: APIClient, random_id):
        response = api_client.get(f"/api/events/{random_id}")
        assert response.status_code == 404
        assert response.data["error"]["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-uuid")
        assert response.status_code == 400
        assert response.data["error"]["code"] == "INVALID_EVENT_ID"
