"""Serializers for dashboard read models."""

from rest_framework import serializers


def money(**kwargs):
    return serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False, **kwargs)


class DashboardStatsSerializer(serializers.Serializer):
    events = serializers.SerializerMethodField()
    users = serializers.SerializerMethodField()
    revenue = money()

    def get_events(self, stats) -> dict:
        return {"total": stats.total_events, "ticketsSold": stats.tickets_sold}

    def get_users(self, stats) -> dict:
        return {"total": stats.active_attendees, "organizers": stats.organizers}


class UserStatsSerializer(serializers.Serializer):
    active = serializers.IntegerField()
    organizers = serializers.IntegerField()
    total = serializers.IntegerField()


class MonthlyRevenueSerializer(serializers.Serializer):
    month = serializers.CharField()
    value = money()


class RevenueStatsSerializer(serializers.Serializer):
    monthly = MonthlyRevenueSerializer(many=True)
    total = money()


class EventSalesSerializer(serializers.Serializer):
    eventId = serializers.CharField(source="event_id")
    title = serializers.CharField()
    ticketsSold = serializers.IntegerField(source="tickets_sold")
    revenue = money()
