"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from events import models
from events.cache import EVENT_LIST_KEY, event_detail_key
from events.stores import DjangoEventStore
from tests.fakes import make_event


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on event changes."""

    def test_event_save_invalidates_list_cache(self):
        event = DjangoEventStore().add_event(make_event())
        cache.set(EVENT_LIST_KEY, ["stale"])

        row = models.Event.objects.get(pk=event.id.value)
        row.title = "Changed"
        row.save()

        assert cache.get(EVENT_LIST_KEY) is None

    def test_event_delete_invalidates_detail_cache(self):
        store = DjangoEventStore()
        event = store.add_event(make_event())
        cache.set(event_detail_key(str(event.id)), {"title": "stale"})

        store.delete_event(event.id)

        assert cache.get(event_detail_key(str(event.id))) is None

    def test_conditional_save_invalidates_detail_cache(self):
        store = DjangoEventStore()
        event = store.add_event(make_event())
        cache.set(EVENT_LIST_KEY, ["stale"])
        cache.set(event_detail_key(str(event.id)), {"title": "stale"})

        event.title = "Changed"
        store.save_event(event, expected_version=event.version)

        assert cache.get(EVENT_LIST_KEY) is None
        assert cache.get(event_detail_key(str(event.id))) is None

    def test_detail_served_from_cache_until_write(self, api_client):
        store = DjangoEventStore()
        event = store.add_event(make_event(title="Original"))
        url = f"/api/events/{event.id}"

        assert api_client.get(url).data["title"] == "Original"
        assert cache.get(event_detail_key(str(event.id)))["title"] == "Original"

        event.title = "Renamed"
        store.save_event(event, expected_version=event.version)

        assert api_client.get(url).data["title"] == "Renamed"

    def test_detail_key_ignores_id_spelling(self, api_client, client_for, attendee):
        event = DjangoEventStore().add_event(make_event())
        shouted = f"/api/events/{str(event.id).upper()}"
        assert api_client.get(shouted).data["ticket_types"][0]["sold"] == 0

        client_for(attendee).post(
            "/api/events/register",
            {
                "event_id": str(event.id),
                "ticket_type_id": str(event.ticket_types[0].id),
                "amount_paid": "10.00",
            },
            format="json",
        )

        assert api_client.get(shouted).data["ticket_types"][0]["sold"] == 1
        assert api_client.get(f"/api/events/{event.id}").data["ticket_types"][0]["sold"] == 1

    def test_detail_route_never_reads_list_key(self, api_client):
        DjangoEventStore().add_event(make_event())
        assert api_client.get("/api/events").status_code == 200
        assert cache.get(EVENT_LIST_KEY) is not None

        response = api_client.get("/api/events/list")

        assert response.status_code == 400
        assert response.data["code"] == "INVALID_EVENT_ID"
