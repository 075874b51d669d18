from bookings.handlers.views import (
    BookingCancelView,
    BookingCreateView,
    BookingDetailView,
    MyBookingsView,
    TicketVerificationView,
)

__all__ = [
    "BookingCancelView",
    "BookingCreateView",
    "BookingDetailView",
    "MyBookingsView",
    "TicketVerificationView",
]
