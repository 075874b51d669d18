from django.urls import path

from bookings.handlers import (
    BookingCancelView,
    BookingCreateView,
    BookingDetailView,
    MyBookingsView,
    TicketVerificationView,
)

urlpatterns = [
    path("bookings", BookingCreateView.as_view(), name="booking-create"),
    path("bookings/my-bookings", MyBookingsView.as_view(), name="booking-mine"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path("bookings/<str:booking_id>/cancel", BookingCancelView.as_view(), name="booking-cancel"),
    path(
        "bookings/<str:booking_id>/tickets/<str:ticket_number>",
        TicketVerificationView.as_view(),
        name="booking-ticket",
    ),
]
