from django.contrib import admin

from bookings.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "event", "ticket_type", "quantity", "total_amount", "status", "booked_at"]
    list_filter = ["status"]
    search_fields = ["user__email", "event__title", "payment_intent_id"]
    readonly_fields = ["ticket_numbers", "booked_at", "paid_at"]
