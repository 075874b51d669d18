"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from bookings.domain import Booking, BookingId, BookingStatus, NewBooking


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def create_booking(self, new_booking: NewBooking) -> Booking:
        """Reserve the tickets and persist the booking in one transaction.

        Raises:
            NotEnoughTicketsError: If the ticket type has fewer tickets left
                than requested at the time of the write.
        """
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        ...

    @abstractmethod
    def list_for_user(self, user_id: UUID) -> list[Booking]:
        """Return the user's bookings, newest first."""
        ...

    @abstractmethod
    def transition(
        self,
        booking_id: BookingId,
        to: BookingStatus,
        from_statuses: Iterable[BookingStatus],
        payment_intent_id: str | None = None,
        paid_at: datetime | None = None,
    ) -> Booking | None:
        """Move a booking to ``to`` if its current status is in ``from_statuses``.

        Tickets are returned to the event when the booking stops holding
        them. Returns the updated booking, or None if no transition happened.
        """
        ...
