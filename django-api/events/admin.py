from django.contrib import admin

from events.models import Event, TicketType


class TicketTypeInline(admin.TabularInline):
    model = TicketType
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "category", "status", "start_date", "location", "created_at"]
    list_filter = ["status", "category", "event_type"]
    search_fields = ["title", "location"]
    inlines = [TicketTypeInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "quantity"]
    list_filter = ["event__category"]
