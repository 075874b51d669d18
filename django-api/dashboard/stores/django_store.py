"""Django ORM implementation of the StatsStore."""

from datetime import datetime
from decimal import Decimal

from django.db.models import Sum
from django.db.models.functions import ExtractMonth

from accounts.domain import AccountStatus, Role
from accounts.models import Account
from bookings.models import Booking
from dashboard.domain import EventSales, SalesTotals
from dashboard.stores.interfaces import StatsStore
from events.models import Event

ZERO = Decimal("0")


def _confirmed():
    return Booking.objects.filter(status=Booking.Status.CONFIRMED)


class DjangoStatsStore(StatsStore):
    def count_events(self) -> int:
        return Event.objects.count()

    def count_accounts(self, role: Role, status: AccountStatus | None = None) -> int:
        qs = Account.objects.filter(role=role.value)
        if status is not None:
            qs = qs.filter(status=status.value)
        return qs.count()

    def confirmed_sales(self) -> SalesTotals:
        totals = _confirmed().aggregate(revenue=Sum("total_amount"), tickets=Sum("quantity"))
        return SalesTotals(revenue=totals["revenue"] or ZERO, tickets_sold=totals["tickets"] or 0)

    def confirmed_revenue_by_month(self, since: datetime, until: datetime) -> dict[int, Decimal]:
        rows = (
            _confirmed()
            .filter(booked_at__gte=since, booked_at__lt=until)
            .annotate(month=ExtractMonth("booked_at"))
            .values("month")
            .annotate(revenue=Sum("total_amount"))
            .order_by("month")
        )
        return {row["month"]: row["revenue"] or ZERO for row in rows}

    def confirmed_sales_by_event(self) -> list[EventSales]:
        rows = (
            _confirmed()
            .values("event_id", "event__title")
            .annotate(tickets=Sum("quantity"), revenue=Sum("total_amount"))
            .order_by("-tickets", "event__title")
        )
        return [
            EventSales(
                event_id=row["event_id"],
                title=row["event__title"],
                tickets_sold=row["tickets"] or 0,
                revenue=row["revenue"] or ZERO,
            )
            for row in rows
        ]
