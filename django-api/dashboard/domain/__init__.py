from dashboard.domain.models import (
    MONTHS,
    DashboardStats,
    EventSales,
    MonthlyRevenue,
    RevenueStats,
    SalesTotals,
    UserStats,
)

__all__ = [
    "MONTHS",
    "DashboardStats",
    "EventSales",
    "MonthlyRevenue",
    "RevenueStats",
    "SalesTotals",
    "UserStats",
]
