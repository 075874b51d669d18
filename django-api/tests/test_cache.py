"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from decimal import Decimal

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from events.cache import POPULAR_KEY, UPCOMING_KEY, detail_key, invalidate_event
from events.models import Event


@pytest.mark.django_db
class TestCachedReads:
    def test_popular_and_upcoming_are_cached(self, api_client: APIClient, organizer, make_event):
        make_event(organizer)
        api_client.get("/api/events/popular")
        api_client.get("/api/events/upcoming")
        assert len(cache.get(POPULAR_KEY)) == 1
        assert len(cache.get(UPCOMING_KEY)) == 1

    def test_published_detail_is_cached(self, api_client: APIClient, organizer, make_event):
        event = make_event(organizer)
        api_client.get(f"/api/events/{event.id}")
        assert cache.get(detail_key(event.id))["title"] == "Jazz Night"

    def test_draft_detail_is_not_cached(self, organizer, organizer_api: APIClient, make_event):
        draft = make_event(organizer, status=Event.Status.DRAFT)
        assert organizer_api.get(f"/api/events/{draft.id}").status_code == 200
        assert cache.get(detail_key(draft.id)) is None

    def test_cached_detail_is_served(self, api_client: APIClient, organizer, make_event):
        event = make_event(organizer)
        cache.set(detail_key(event.id), {"title": "From cache"})
        assert api_client.get(f"/api/events/{event.id}").json()["data"] == {"title": "From cache"}


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def _warm(self, client: APIClient, event: Event) -> None:
        client.get("/api/events/popular")
        client.get("/api/events/upcoming")
        client.get(f"/api/events/{event.id}")
        assert cache.get(detail_key(event.id)) is not None

    def _assert_cleared(self, event: Event) -> None:
        assert cache.get(POPULAR_KEY) is None
        assert cache.get(UPCOMING_KEY) is None
        assert cache.get(detail_key(event.id)) is None

    def test_event_save_invalidates_lists_and_detail(self, api_client: APIClient, organizer, make_event):
        event = make_event(organizer)
        self._warm(api_client, event)
        event.title = "Renamed"
        event.save()
        self._assert_cleared(event)

    def test_event_delete_invalidates_detail(self, api_client: APIClient, organizer, make_event):
        event = make_event(organizer)
        self._warm(api_client, event)
        Event.objects.get(id=event.id).delete()
        self._assert_cleared(event)

    def test_ticket_type_save_invalidates_owning_event(self, api_client: APIClient, organizer, make_event):
        event = make_event(organizer)
        self._warm(api_client, event)
        ticket = event.ticket_types.get()
        ticket.price = Decimal("30.00")
        ticket.save()
        self._assert_cleared(event)

    def test_booking_invalidates_event(self, api_client: APIClient, organizer, user_api: APIClient, make_event):
        event = make_event(organizer)
        self._warm(api_client, event)
        response = user_api.post(
            "/api/bookings", {"eventId": str(event.id), "ticketType": "General", "quantity": 1}, format="json"
        )
        assert response.status_code == 201
        self._assert_cleared(event)
        refreshed = api_client.get(f"/api/events/{event.id}").json()["data"]
        assert refreshed["ticketing"][0]["quantity"] == 99

    def test_invalidate_event_leaves_other_details(self, organizer, make_event):
        first, second = make_event(organizer), make_event(organizer)
        cache.set(detail_key(first.id), {"title": "a"})
        cache.set(detail_key(second.id), {"title": "b"})
        invalidate_event(first.id)
        assert cache.get(detail_key(first.id)) is None
        assert cache.get(detail_key(second.id)) == {"title": "b"}
