"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from bookings.domain import BookingStatus
from dashboard.domain.models import MonthlyRevenue, RevenueStats, UserStats
from events.domain import Capacity, EventCategory, EventId, Money
from events.domain.errors import InvalidFilterError
from events.services.event_service import add_month, date_window
from payments.domain import PaymentIntent, WebhookEvent


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_zero(self):
        assert Money(Decimal("0")).amount == Decimal("0")

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        assert str(Money(Decimal("5"))) == "5.00"

    def test_money_multiplies_by_quantity(self):
        assert Money(Decimal("12.50")) * 3 == Money(Decimal("37.50"))

    def test_cents_rounds_to_whole_cents(self):
        assert Money(Decimal("19.99")).cents == 1999
        assert Money(Decimal("0.5")).cents == 50


class TestCapacity:
    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestEventId:
    def test_from_string_valid_uuid(self):
        raw = uuid4()
        assert EventId.from_string(str(raw)).value == raw

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestEventCategory:
    def test_label_is_title_cased(self):
        assert EventCategory.MUSICAL_CONCERT.label == "Musical Concert"
        assert EventCategory.OTHER.label == "Other"


class TestBookingStatus:
    @pytest.mark.parametrize(
        "status,holds",
        [
            (BookingStatus.PENDING, True),
            (BookingStatus.CONFIRMED, True),
            (BookingStatus.CANCELLED, False),
            (BookingStatus.FAILED, False),
        ],
    )
    def test_only_live_bookings_hold_tickets(self, status, holds):
        assert status.holds_tickets is holds


class TestDateWindow:
    """Named date ranges used by the explore filters."""

    WEDNESDAY = datetime(2026, 10, 21, 15, 30, tzinfo=timezone.utc)

    def test_today_starts_at_midnight(self):
        start, end = date_window("today", self.WEDNESDAY)
        assert start == datetime(2026, 10, 21, tzinfo=timezone.utc)
        assert end == datetime(2026, 10, 22, tzinfo=timezone.utc)

    def test_weekend_runs_friday_to_monday(self):
        start, end = date_window("weekend", self.WEDNESDAY)
        assert start == datetime(2026, 10, 23, tzinfo=timezone.utc)
        assert end == datetime(2026, 10, 26, tzinfo=timezone.utc)

    def test_weekend_on_sunday_is_next_weekend(self):
        sunday = datetime(2026, 10, 25, 9, tzinfo=timezone.utc)
        start, _ = date_window("weekend", sunday)
        assert start == datetime(2026, 10, 30, tzinfo=timezone.utc)

    def test_unknown_range_raises(self):
        with pytest.raises(InvalidFilterError):
            date_window("fortnight", self.WEDNESDAY)

    def test_add_month_clamps_day(self):
        assert add_month(datetime(2026, 1, 31, tzinfo=timezone.utc)) == datetime(2026, 2, 28, tzinfo=timezone.utc)
        assert add_month(datetime(2026, 12, 15, tzinfo=timezone.utc)) == datetime(2027, 1, 15, tzinfo=timezone.utc)


class TestDashboardModels:
    def test_user_total_is_attendees_plus_organizers(self):
        assert UserStats(active=7, organizers=3).total == 10

    def test_revenue_total_sums_months(self):
        stats = RevenueStats(
            monthly=(MonthlyRevenue("Jan", Decimal("10.50")), MonthlyRevenue("Feb", Decimal("4.50")))
        )
        assert stats.total == Decimal("15.00")

    def test_empty_revenue_total_is_zero(self):
        assert RevenueStats(monthly=()).total == Decimal("0")


class TestPaymentModels:
    def test_amount_is_in_major_units(self):
        intent = PaymentIntent(id="pi_1", status="succeeded", amount_cents=2599, currency="usd")
        assert intent.amount == Decimal("25.99")
        assert intent.succeeded

    def test_webhook_metadata_defaults_to_empty(self):
        assert WebhookEvent(type="payment_intent.succeeded", payload={"id": "pi_1"}).metadata == {}
