"""Integration tests for attendee bookings.

Run with: pytest tests/test_bookings.py -v
"""

from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from accounts.domain import Role
from bookings.models import Booking
from events.models import Event, TicketType


def book(client: APIClient, event: Event, ticket_type: str = "General", quantity: int = 2):
    return client.post(
        "/api/bookings",
        {"eventId": str(event.id), "ticketType": ticket_type, "quantity": quantity},
        format="json",
    )


def remaining(event: Event, name: str = "General") -> int:
    return TicketType.objects.get(event=event, name=name).quantity


@pytest.mark.django_db
class TestCreateBooking:
    def test_paid_booking_is_pending_and_reserves_tickets(self, user_api: APIClient, organizer, make_event):
        event = make_event(organizer)
        response = book(user_api, event)
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Booking created successfully"
        data = body["data"]
        assert data["status"] == "pending"
        assert data["totalAmount"] == 40.0
        assert len(data["ticketNumbers"]) == 2
        assert data["ticketNumbers"][0].startswith(f"{event.id}-")
        assert data["ticketNumbers"][1].endswith("-2")
        assert remaining(event) == 98

    def test_free_booking_is_confirmed(self, user_api: APIClient, organizer, make_event):
        event = make_event(organizer, tickets=[("Free", "0", 10)], event_type=Event.EventType.FREE)
        data = book(user_api, event, ticket_type="Free", quantity=1).json()["data"]
        assert data["status"] == "confirmed"
        assert data["totalAmount"] == 0.0

    def test_not_enough_tickets(self, user_api: APIClient, organizer, make_event):
        event = make_event(organizer, tickets=[("General", "20.00", 1)])
        response = book(user_api, event, quantity=2)
        assert response.status_code == 400
        assert response.json()["message"] == "Not enough tickets available"
        assert remaining(event) == 1

    def test_last_tickets_cannot_be_oversold(self, user_api: APIClient, make_account, client_for, organizer, make_event):
        event = make_event(organizer, tickets=[("General", "20.00", 2)])
        assert book(user_api, event, quantity=2).status_code == 201
        other = client_for(make_account(Role.USER))
        assert book(other, event, quantity=1).json()["message"] == "Not enough tickets available"
        assert remaining(event) == 0

    def test_unknown_ticket_type(self, user_api: APIClient, organizer, make_event):
        event = make_event(organizer)
        response = book(user_api, event, ticket_type="Backstage")
        assert response.status_code == 404
        assert response.json()["message"] == "Ticket type not found"

    def test_draft_event_cannot_be_booked(self, user_api: APIClient, organizer, make_event):
        event = make_event(organizer, status=Event.Status.DRAFT)
        response = book(user_api, event)
        assert response.status_code == 404
        assert response.json()["message"] == "Event not found"

    def test_missing_fields(self, user_api: APIClient):
        response = user_api.post("/api/bookings", {"quantity": 1}, format="json")
        assert response.status_code == 400
        assert response.json()["message"] == "Please provide all required fields"

    def test_quantity_must_be_positive(self, user_api: APIClient, organizer, make_event):
        event = make_event(organizer)
        assert book(user_api, event, quantity=0).status_code == 400

    def test_organizer_cannot_book(self, organizer_api: APIClient, organizer, make_event):
        event = make_event(organizer)
        assert book(organizer_api, event).status_code == 403


@pytest.mark.django_db
class TestReadBookings:
    def test_my_bookings_lists_only_mine(self, user_api: APIClient, make_account, client_for, organizer, make_event):
        event = make_event(organizer)
        book(user_api, event)
        book(client_for(make_account(Role.USER)), event)
        data = user_api.get("/api/bookings/my-bookings").json()["data"]
        assert len(data) == 1
        assert data[0]["event"]["title"] == "Jazz Night"

    def test_get_own_booking(self, user_api: APIClient, organizer, make_event):
        booking_id = book(user_api, make_event(organizer)).json()["data"]["id"]
        response = user_api.get(f"/api/bookings/{booking_id}")
        assert response.status_code == 200
        assert response.json()["data"]["id"] == booking_id

    def test_other_attendee_is_forbidden(self, user_api: APIClient, make_account, client_for, organizer, make_event):
        booking_id = book(user_api, make_event(organizer)).json()["data"]["id"]
        other = client_for(make_account(Role.USER))
        response = other.get(f"/api/bookings/{booking_id}")
        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to view this booking"

    def test_unknown_booking(self, user_api: APIClient):
        assert user_api.get(f"/api/bookings/{uuid4()}").status_code == 404
        assert user_api.get("/api/bookings/nope").json()["message"] == "Invalid booking ID format"


@pytest.mark.django_db
class TestCancelBooking:
    def test_cancel_releases_tickets(self, user_api: APIClient, organizer, make_event):
        event = make_event(organizer)
        booking_id = book(user_api, event).json()["data"]["id"]
        assert remaining(event) == 98
        response = user_api.put(f"/api/bookings/{booking_id}/cancel")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "cancelled"
        assert remaining(event) == 100

    def test_cancel_twice(self, user_api: APIClient, organizer, make_event):
        event = make_event(organizer)
        booking_id = book(user_api, event).json()["data"]["id"]
        user_api.put(f"/api/bookings/{booking_id}/cancel")
        response = user_api.put(f"/api/bookings/{booking_id}/cancel")
        assert response.status_code == 400
        assert response.json()["message"] == "Booking is already cancelled"
        assert remaining(event) == 100

    def test_cancel_someone_elses_booking(self, user_api: APIClient, make_account, client_for, organizer, make_event):
        booking_id = book(user_api, make_event(organizer)).json()["data"]["id"]
        other = client_for(make_account(Role.USER))
        response = other.put(f"/api/bookings/{booking_id}/cancel")
        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to cancel this booking"


@pytest.mark.django_db
class TestTicketVerification:
    def _confirmed_ticket(self, user_api: APIClient, event: Event) -> tuple[str, str]:
        data = book(user_api, event, quantity=1).json()["data"]
        Booking.objects.filter(id=data["id"]).update(status=Booking.Status.CONFIRMED)
        return data["id"], data["ticketNumbers"][0]

    def test_organizer_verifies_confirmed_ticket(self, user_api: APIClient, organizer, organizer_api: APIClient, make_event):
        booking_id, ticket = self._confirmed_ticket(user_api, make_event(organizer))
        data = organizer_api.get(f"/api/bookings/{booking_id}/tickets/{ticket}").json()["data"]
        assert data["isValid"] is True
        assert data["ticketNumber"] == ticket

    def test_unknown_ticket_number_is_invalid(self, user_api: APIClient, organizer, make_event):
        booking_id, _ = self._confirmed_ticket(user_api, make_event(organizer))
        data = user_api.get(f"/api/bookings/{booking_id}/tickets/forged-1").json()["data"]
        assert data["isValid"] is False

    def test_pending_ticket_is_invalid(self, user_api: APIClient, organizer, make_event):
        data = book(user_api, make_event(organizer), quantity=1).json()["data"]
        check = user_api.get(f"/api/bookings/{data['id']}/tickets/{data['ticketNumbers'][0]}").json()["data"]
        assert check["isValid"] is False

    def test_unrelated_organizer_is_forbidden(self, user_api: APIClient, make_account, client_for, organizer, make_event):
        booking_id, ticket = self._confirmed_ticket(user_api, make_event(organizer))
        rival = client_for(make_account(Role.ORGANIZER))
        assert rival.get(f"/api/bookings/{booking_id}/tickets/{ticket}").status_code == 403

    def test_admin_can_verify(self, user_api: APIClient, admin_api: APIClient, organizer, make_event):
        booking_id, ticket = self._confirmed_ticket(user_api, make_event(organizer))
        assert admin_api.get(f"/api/bookings/{booking_id}/tickets/{ticket}").json()["data"]["isValid"] is True
