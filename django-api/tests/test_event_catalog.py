"""Integration tests for the event catalog and organizer event workflow.

Run with: pytest tests/test_event_catalog.py -v
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from accounts.domain import Role
from events.models import Event
from fakes import PNG_DATA_URL


@pytest.mark.django_db
class TestPublicCatalog:
    """Tests for the public /api/events read routes."""

    def test_categories_list_every_category(self, api_client: APIClient):
        response = api_client.get("/api/events/categories")
        assert response.status_code == 200
        values = [c["value"] for c in response.json()["data"]]
        assert "MUSICAL_CONCERT" in values
        assert len(values) == 16

    def test_popular_shows_only_published(self, api_client: APIClient, organizer, make_event):
        make_event(organizer, title="Live")
        make_event(organizer, title="Hidden", status=Event.Status.DRAFT)
        response = api_client.get("/api/events/popular")
        assert [e["title"] for e in response.json()["data"]] == ["Live"]

    def test_event_payload_shape(self, api_client: APIClient, organizer, make_event):
        event = make_event(organizer)
        data = api_client.get(f"/api/events/{event.id}").json()["data"]
        assert data["id"] == str(event.id)
        assert data["categoryLabel"] == "Musical Concert"
        assert data["organizer"]["organization"] == "Acme"
        assert data["ticketing"][0]["name"] == "General"
        assert data["ticketing"][0]["price"] == 20.0

    def test_category_view_excludes_past_events(self, api_client: APIClient, organizer, make_event):
        make_event(organizer, title="Soon")
        make_event(organizer, title="Gone", starts_in=timedelta(days=-2))
        response = api_client.get("/api/events/category/MUSICAL_CONCERT")
        assert [e["title"] for e in response.json()["data"]] == ["Soon"]

    def test_unknown_category_is_rejected(self, api_client: APIClient):
        response = api_client.get("/api/events/category/KARAOKE")
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Unknown event category: KARAOKE"}

    def test_search_matches_title_and_location(self, api_client: APIClient, organizer, make_event):
        make_event(organizer, title="Jazz Night")
        make_event(organizer, title="Rock Fest", location="Jazz Park")
        make_event(organizer, title="Chess Open", location="Library", description="Board games")
        response = api_client.get("/api/events/search", {"query": "jazz"})
        assert sorted(e["title"] for e in response.json()["data"]) == ["Jazz Night", "Rock Fest"]

    def test_search_without_query_is_empty(self, api_client: APIClient, organizer, make_event):
        make_event(organizer)
        assert api_client.get("/api/events/search").json()["data"] == []

    def test_all_filters_by_price_range(self, api_client: APIClient, organizer, make_event):
        make_event(organizer, title="Cheap", tickets=[("General", "10.00", 5)])
        make_event(organizer, title="Mid", tickets=[("General", "25.00", 5), ("VIP", "80.00", 5)])
        make_event(organizer, title="Free", tickets=[("Free", "0", 5)], event_type=Event.EventType.FREE)
        body = api_client.get("/api/events/all", {"priceRange": "25-50"}).json()
        assert [e["title"] for e in body["data"]] == ["Mid"]
        assert body["count"] == 1

        free = api_client.get("/api/events/all", {"priceRange": "free"}).json()
        assert [e["title"] for e in free["data"]] == ["Free"]

    def test_all_orders_soonest_first(self, api_client: APIClient, organizer, make_event):
        make_event(organizer, title="Later", starts_in=timedelta(days=10))
        make_event(organizer, title="Sooner", starts_in=timedelta(days=1))
        titles = [e["title"] for e in api_client.get("/api/events/all").json()["data"]]
        assert titles == ["Sooner", "Later"]

    def test_all_rejects_unknown_date_range(self, api_client: APIClient):
        response = api_client.get("/api/events/all", {"dateRange": "someday"})
        assert response.status_code == 400


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/events/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["message"] == "Event not found"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-uuid")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid event ID format"

    def test_draft_hidden_from_public_but_visible_to_owner(
        self, api_client: APIClient, organizer, organizer_api: APIClient, make_event
    ):
        draft = make_event(organizer, status=Event.Status.DRAFT)
        assert api_client.get(f"/api/events/{draft.id}").status_code == 404
        assert organizer_api.get(f"/api/events/{draft.id}").status_code == 200


@pytest.mark.django_db
class TestOrganizerWorkflow:
    """Create, banner, ticketing, publish and edit."""

    DETAILS = {
        "title": "Tech Summit",
        "category": "CONFERENCE",
        "startDate": "2030-05-01T09:00:00Z",
        "startTime": "09:00",
        "location": "Expo Center",
        "description": "Talks and workshops",
    }

    def test_attendee_cannot_create_event(self, user_api: APIClient):
        response = user_api.post("/api/events", self.DETAILS, format="json")
        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to access this route"

    def test_anonymous_cannot_create_event(self, api_client: APIClient):
        response = api_client.post("/api/events", self.DETAILS, format="json")
        assert response.status_code == 401
        assert response.json()["message"] == "Please login to access this resource"

    def test_full_workflow(self, organizer_api: APIClient, api_client: APIClient, media_root):
        response = organizer_api.post("/api/events", self.DETAILS, format="json")
        assert response.status_code == 201
        event = response.json()["data"]
        assert event["status"] == "draft"
        event_id = event["id"]

        publish = organizer_api.patch(f"/api/events/{event_id}/publish")
        assert publish.status_code == 400
        assert publish.json()["message"] == "Please complete all event details before publishing"

        banner = organizer_api.patch(
            f"/api/events/{event_id}/banner", {"bannerImage": PNG_DATA_URL}, format="json"
        )
        assert banner.status_code == 200
        assert banner.json()["data"]["bannerImage"].startswith("/media/event-banners/")

        ticketing = organizer_api.patch(
            f"/api/events/{event_id}/ticketing",
            {"eventType": "ticketed", "ticketing": [{"name": "Early Bird", "price": "15.00", "quantity": 50}]},
            format="json",
        )
        assert ticketing.status_code == 200
        assert ticketing.json()["data"]["ticketing"][0]["quantity"] == 50

        published = organizer_api.patch(f"/api/events/{event_id}/publish")
        assert published.json()["data"]["status"] == "published"
        assert api_client.get(f"/api/events/{event_id}").status_code == 200

    def test_banner_required(self, organizer, organizer_api: APIClient, make_event):
        event = make_event(organizer, status=Event.Status.DRAFT)
        response = organizer_api.patch(f"/api/events/{event.id}/banner", {}, format="json")
        assert response.status_code == 400
        assert response.json()["message"] == "Please provide a banner image"

    def test_duplicate_ticket_names_rejected(self, organizer, organizer_api: APIClient, make_event):
        event = make_event(organizer, status=Event.Status.DRAFT)
        response = organizer_api.patch(
            f"/api/events/{event.id}/ticketing",
            {
                "eventType": "ticketed",
                "ticketing": [
                    {"name": "GA", "price": "10", "quantity": 1},
                    {"name": "GA", "price": "20", "quantity": 1},
                ],
            },
            format="json",
        )
        assert response.status_code == 400

    def test_other_organizer_gets_not_found(self, make_account, client_for, organizer, make_event):
        event = make_event(organizer, status=Event.Status.DRAFT)
        rival = client_for(make_account(Role.ORGANIZER))
        response = rival.get(f"/api/events/edit/{event.id}")
        assert response.status_code == 404
        assert response.json()["message"] == "Event not found or not authorized"

    def test_published_event_edit_is_limited(self, organizer, organizer_api: APIClient, make_event):
        event = make_event(organizer)
        edited = organizer_api.put(f"/api/events/{event.id}", {"title": "Renamed", "location": ""}, format="json")
        assert edited.status_code == 200
        assert edited.json()["data"]["title"] == "Renamed"
        assert edited.json()["data"]["location"] == "Blue Hall"

        locked = organizer_api.put(f"/api/events/{event.id}", {"startTime": "21:00"}, format="json")
        assert locked.status_code == 400
        assert locked.json()["message"] == "Published events can only have title, description, and location updated"

    def test_organizer_lists_own_events(self, make_account, organizer, organizer_api: APIClient, make_event):
        make_event(organizer, title="Mine", status=Event.Status.DRAFT)
        make_event(make_account(Role.ORGANIZER), title="Theirs")
        titles = [e["title"] for e in organizer_api.get("/api/events/organizer/events").json()["data"]]
        assert titles == ["Mine"]


@pytest.mark.django_db
class TestAdminEventLists:
    def test_admin_sees_past_and_upcoming(self, admin_api: APIClient, organizer, make_event):
        make_event(organizer, title="Next", status=Event.Status.DRAFT)
        make_event(organizer, title="Last", starts_in=timedelta(days=-5))
        upcoming = admin_api.get("/api/events/admin/upcoming").json()["data"]
        past = admin_api.get("/api/events/admin/past").json()["data"]
        assert [e["title"] for e in upcoming] == ["Next"]
        assert [e["title"] for e in past] == ["Last"]

    def test_non_admin_rejected(self, organizer_api: APIClient):
        assert organizer_api.get("/api/events/admin/upcoming").status_code == 403


@pytest.mark.django_db
def test_unknown_route_returns_json_404(api_client: APIClient):
    response = api_client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route GET /api/nowhere not found"}
