"""HTTP handlers for admin dashboard statistics."""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdmin
from common.responses import ok
from dashboard.handlers.serializers import (
    DashboardStatsSerializer,
    EventSalesSerializer,
    RevenueStatsSerializer,
    UserStatsSerializer,
)
from dashboard.services.stats_service import StatsService
from dashboard.stores.django_store import DjangoStatsStore


def get_stats_service() -> StatsService:
    return StatsService(DjangoStatsStore())


class DashboardStatsView(APIView):
    """Handler for GET /api/admin/dashboard/stats"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        return ok(DashboardStatsSerializer(get_stats_service().dashboard()).data)


class UserStatsView(APIView):
    """Handler for GET /api/admin/users/stats"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        return ok(UserStatsSerializer(get_stats_service().users()).data)


class RevenueStatsView(APIView):
    """Handler for GET /api/admin/revenue/stats"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        return ok(RevenueStatsSerializer(get_stats_service().revenue()).data)


class TicketStatsView(APIView):
    """Handler for GET /api/admin/tickets/stats"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        return ok(EventSalesSerializer(get_stats_service().ticket_sales(), many=True).data)
