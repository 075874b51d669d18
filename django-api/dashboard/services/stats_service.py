"""Admin dashboard statistics."""

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from django.utils import timezone

from accounts.domain import AccountStatus, Role
from dashboard.domain import MONTHS, DashboardStats, EventSales, MonthlyRevenue, RevenueStats, UserStats
from dashboard.stores.interfaces import StatsStore


class StatsService:
    def __init__(self, store: StatsStore, now: Callable[[], datetime] = timezone.now) -> None:
        self._store = store
        self._now = now

    def dashboard(self) -> DashboardStats:
        sales = self._store.confirmed_sales()
        return DashboardStats(
            total_events=self._store.count_events(),
            tickets_sold=sales.tickets_sold,
            active_attendees=self._store.count_accounts(Role.USER, AccountStatus.ACTIVE),
            organizers=self._store.count_accounts(Role.ORGANIZER),
            revenue=sales.revenue,
        )

    def users(self) -> UserStats:
        return UserStats(
            active=self._store.count_accounts(Role.USER, AccountStatus.ACTIVE),
            organizers=self._store.count_accounts(Role.ORGANIZER),
        )

    def revenue(self) -> RevenueStats:
        """Confirmed revenue per month of the current calendar year."""
        now = timezone.localtime(self._now())
        start = now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
        by_month = self._store.confirmed_revenue_by_month(start, start.replace(year=start.year + 1))
        return RevenueStats(
            monthly=tuple(
                MonthlyRevenue(month=name, value=by_month.get(number, Decimal("0")))
                for number, name in enumerate(MONTHS, start=1)
            )
        )

    def ticket_sales(self) -> list[EventSales]:
        return self._store.confirmed_sales_by_event()
