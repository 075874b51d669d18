"""Store interfaces for dashboard aggregates."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal

from accounts.domain import AccountStatus, Role
from dashboard.domain import EventSales, SalesTotals


class StatsStore(ABC):
    """Read-only aggregates across accounts, events and bookings."""

    @abstractmethod
    def count_events(self) -> int:
        ...

    @abstractmethod
    def count_accounts(self, role: Role, status: AccountStatus | None = None) -> int:
        ...

    @abstractmethod
    def confirmed_sales(self) -> SalesTotals:
        ...

    @abstractmethod
    def confirmed_revenue_by_month(self, since: datetime, until: datetime) -> dict[int, Decimal]:
        """Revenue of confirmed bookings booked in [since, until), keyed by month number 1-12."""
        ...

    @abstractmethod
    def confirmed_sales_by_event(self) -> list[EventSales]:
        """Per-event sales, best sellers first."""
        ...
