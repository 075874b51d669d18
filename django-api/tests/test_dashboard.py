"""Integration tests for the admin dashboard statistics.

Run with: pytest tests/test_dashboard.py -v
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.domain import AccountStatus, Role
from bookings.models import Booking


@pytest.fixture
def make_booking(db):
    def make(account, event, quantity=2, total="40.00", status=Booking.Status.CONFIRMED):
        return Booking.objects.create(
            user_id=account.id.value,
            event=event,
            ticket_type="General",
            quantity=quantity,
            total_amount=Decimal(total),
            status=status,
            ticket_numbers=[f"T-{n}" for n in range(quantity)],
        )

    return make


@pytest.mark.django_db
class TestDashboardStats:
    def test_counts_confirmed_sales_only(self, admin_api: APIClient, attendee, organizer, make_event, make_booking):
        event = make_event(organizer)
        make_booking(attendee, event, quantity=2, total="40.00")
        make_booking(attendee, event, quantity=5, total="100.00", status=Booking.Status.PENDING)
        make_booking(attendee, event, quantity=1, total="20.00", status=Booking.Status.CANCELLED)

        data = admin_api.get("/api/admin/dashboard/stats").json()["data"]
        assert data["events"] == {"total": 1, "ticketsSold": 2}
        assert data["users"] == {"total": 1, "organizers": 1}
        assert data["revenue"] == 40.0

    def test_empty_platform(self, admin_api: APIClient):
        data = admin_api.get("/api/admin/dashboard/stats").json()["data"]
        assert data["events"]["ticketsSold"] == 0
        assert data["revenue"] == 0.0

    def test_requires_admin(self, organizer_api: APIClient, api_client: APIClient):
        assert organizer_api.get("/api/admin/dashboard/stats").status_code == 403
        assert api_client.get("/api/admin/dashboard/stats").status_code == 401


@pytest.mark.django_db
class TestUserStats:
    def test_users_stats_route_is_not_a_user_id(self, admin_api: APIClient, make_account):
        make_account(Role.USER)
        make_account(Role.USER, status=AccountStatus.BLOCKED)
        make_account(Role.ORGANIZER)
        response = admin_api.get("/api/admin/users/stats")
        assert response.status_code == 200
        assert response.json()["data"] == {"active": 1, "organizers": 1, "total": 2}


@pytest.mark.django_db
class TestRevenueStats:
    def test_twelve_months_with_current_month_filled(self, admin_api: APIClient, attendee, organizer, make_event, make_booking):
        make_booking(attendee, make_event(organizer), total="55.50")
        data = admin_api.get("/api/admin/revenue/stats").json()["data"]
        assert [m["month"] for m in data["monthly"]][:3] == ["Jan", "Feb", "Mar"]
        assert len(data["monthly"]) == 12
        current = data["monthly"][timezone.localtime().month - 1]
        assert current["value"] == 55.5
        assert data["total"] == 55.5

    def test_last_year_is_excluded(self, admin_api: APIClient, attendee, organizer, make_event, make_booking):
        booking = make_booking(attendee, make_event(organizer), total="10.00")
        Booking.objects.filter(id=booking.id).update(booked_at=timezone.now() - timedelta(days=400))
        assert admin_api.get("/api/admin/revenue/stats").json()["data"]["total"] == 0.0


@pytest.mark.django_db
class TestTicketStats:
    def test_sales_per_event_best_first(self, admin_api: APIClient, attendee, organizer, make_event, make_booking):
        quiet = make_event(organizer, title="Quiet")
        busy = make_event(organizer, title="Busy")
        make_booking(attendee, quiet, quantity=1, total="20.00")
        make_booking(attendee, busy, quantity=3, total="60.00")
        make_booking(attendee, busy, quantity=2, total="40.00")

        data = admin_api.get("/api/admin/tickets/stats").json()["data"]
        assert [(row["title"], row["ticketsSold"], row["revenue"]) for row in data] == [
            ("Busy", 5, 100.0),
            ("Quiet", 1, 20.0),
        ]
        assert data[0]["eventId"] == str(busy.id)
