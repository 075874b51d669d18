from dashboard.handlers.views import (
    DashboardStatsView,
    RevenueStatsView,
    TicketStatsView,
    UserStatsView,
)

__all__ = ["DashboardStatsView", "RevenueStatsView", "TicketStatsView", "UserStatsView"]
