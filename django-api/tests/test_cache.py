"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from events.cache import EVENT_LIST_KEY, event_detail_key


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_list_and_detail(self, make_db_event):
        event = make_db_event()
        cache.set(EVENT_LIST_KEY, ["stale"])
        cache.set(event_detail_key(str(event.id)), {"stale": True})

        event.name = "Renamed"
        event.save()

        assert cache.get(EVENT_LIST_KEY) is None
        assert cache.get(event_detail_key(str(event.id))) is None

    def test_ticket_category_save_invalidates_parent_event(self, make_db_event):
        event = make_db_event()
        cache.set(event_detail_key(str(event.id)), {"stale": True})

        category = event.ticket_categories.first()
        category.sold = 5
        category.save()

        assert cache.get(event_detail_key(str(event.id))) is None

    def test_event_delete_invalidates(self, make_db_event):
        event = make_db_event()
        event_id = str(event.id)
        cache.set(event_detail_key(event_id), {"stale": True})

        event.delete()

        assert cache.get(event_detail_key(event_id)) is None

    def test_confirming_a_booking_refreshes_catalog(self, make_db_event):
        """Sold counters move through queryset updates; the event is touched so caches drop."""
        from events.domain import EventId
        from events.stores.django_store import DjangoEventStore

        event = make_db_event()
        cache.set(event_detail_key(str(event.id)), {"stale": True})

        DjangoEventStore().add_sold(EventId(event.id), {"General": 1})

        assert cache.get(event_detail_key(str(event.id))) is None

    def test_detail_cached_under_canonical_id(self, api_client, make_db_event):
        event = make_db_event()
        upper = str(event.id).upper()

        assert api_client.get(f"/api/events/{upper}").status_code == 200
        assert cache.get(event_detail_key(str(event.id))) is not None

        event.name = "Renamed"
        event.save()

        response = api_client.get(f"/api/events/{upper}")
        assert response.data["name"] == "Renamed"
