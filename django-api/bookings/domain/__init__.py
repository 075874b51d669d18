from bookings.domain.models import BookedEvent, Booking, BookingHolder, NewBooking
from bookings.domain.value_objects import BookingId, BookingStatus

__all__ = [
    "BookedEvent",
    "Booking",
    "BookingHolder",
    "NewBooking",
    "BookingId",
    "BookingStatus",
]
