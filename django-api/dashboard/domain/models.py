"""Read models for the admin dashboard."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class SalesTotals:
    """Totals over confirmed bookings."""

    revenue: Decimal
    tickets_sold: int


@dataclass(frozen=True)
class DashboardStats:
    total_events: int
    tickets_sold: int
    active_attendees: int
    organizers: int
    revenue: Decimal


@dataclass(frozen=True)
class UserStats:
    active: int
    organizers: int

    @property
    def total(self) -> int:
        return self.active + self.organizers


@dataclass(frozen=True)
class MonthlyRevenue:
    month: str
    value: Decimal


@dataclass(frozen=True)
class RevenueStats:
    monthly: tuple[MonthlyRevenue, ...]

    @property
    def total(self) -> Decimal:
        return sum((m.value for m in self.monthly), Decimal("0"))


@dataclass(frozen=True)
class EventSales:
    event_id: UUID
    title: str
    tickets_sold: int
    revenue: Decimal
