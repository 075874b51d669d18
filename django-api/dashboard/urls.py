from django.urls import path

from dashboard.handlers import DashboardStatsView, RevenueStatsView, TicketStatsView, UserStatsView

# /api/admin/, included ahead of the account routes so users/stats is not read as a user id.
urlpatterns = [
    path("dashboard/stats", DashboardStatsView.as_view(), name="admin-dashboard-stats"),
    path("users/stats", UserStatsView.as_view(), name="admin-user-stats"),
    path("revenue/stats", RevenueStatsView.as_view(), name="admin-revenue-stats"),
    path("tickets/stats", TicketStatsView.as_view(), name="admin-ticket-stats"),
]
