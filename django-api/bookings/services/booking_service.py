"""Booking service - ticket reservation, cancellation and ticket checks."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from django.utils import timezone

from bookings.domain import Booking, BookingId, BookingStatus, NewBooking
from bookings.domain.errors import (
    BookingForbiddenError,
    BookingNotCancellableError,
    BookingNotFoundError,
    InvalidBookingIdError,
    NotEnoughTicketsError,
    TicketTypeNotFoundError,
)
from bookings.stores.interfaces import BookingStore
from events.domain import EventId
from events.domain.errors import EventNotFoundError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_booking_id(booking_id: str) -> BookingId:
    try:
        return BookingId.from_string(booking_id)
    except ValueError:
        raise InvalidBookingIdError()


def ticket_numbers(event_id: EventId, quantity: int, issued_at: datetime) -> tuple[str, ...]:
    """``<event id>-<epoch ms>-<n>`` for n in 1..quantity."""
    millis = int(issued_at.timestamp() * 1000)
    return tuple(f"{event_id}-{millis}-{n}" for n in range(1, quantity + 1))


@dataclass(frozen=True)
class TicketCheck:
    booking: Booking
    ticket_number: str

    @property
    def is_valid(self) -> bool:
        return (
            self.booking.status is BookingStatus.CONFIRMED
            and self.ticket_number in self.booking.ticket_numbers
        )


class BookingService:
    def __init__(
        self,
        booking_store: BookingStore,
        event_store: EventStore,
        now: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._bookings = booking_store
        self._events = event_store
        self._now = now

    def create_booking(self, user_id: UUID, event_id: str, ticket_type: str, quantity: int) -> Booking:
        """Reserve tickets for a published event.

        Free bookings are confirmed immediately; paid bookings stay pending
        until the payment succeeds.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist or is not published.
            TicketTypeNotFoundError: If the event has no such ticket type.
            NotEnoughTicketsError: If fewer tickets remain than requested.
        """
        event = self._events.get_event(parse_event_id(event_id))
        if event is None or not event.is_published:
            raise EventNotFoundError()

        ticket = event.ticket_type(ticket_type)
        if ticket is None:
            raise TicketTypeNotFoundError()
        if ticket.quantity.value < quantity:
            raise NotEnoughTicketsError()

        total = ticket.price * quantity
        booking = self._bookings.create_booking(
            NewBooking(
                user_id=user_id,
                event_id=event.id,
                ticket_type=ticket.name,
                quantity=quantity,
                total_amount=total,
                status=BookingStatus.CONFIRMED if total.amount == 0 else BookingStatus.PENDING,
                ticket_numbers=ticket_numbers(event.id, quantity, self._now()),
            )
        )
        logger.info(
            "User %s booked %d x %s for event %s (%s)",
            user_id, quantity, ticket.name, event.id, booking.status.value,
        )
        return booking

    def list_for_user(self, user_id: UUID) -> list[Booking]:
        return self._bookings.list_for_user(user_id)

    def find_booking(self, booking_id: str) -> Booking:
        booking = self._bookings.get_booking(parse_booking_id(booking_id))
        if booking is None:
            raise BookingNotFoundError()
        return booking

    def get_booking(self, booking_id: str, user_id: UUID) -> Booking:
        booking = self.find_booking(booking_id)
        if not booking.is_owned_by(user_id):
            raise BookingForbiddenError("view")
        return booking

    def cancel_booking(self, booking_id: str, user_id: UUID) -> Booking:
        """Cancel the caller's booking and return its tickets to the event."""
        booking = self.find_booking(booking_id)
        if not booking.is_owned_by(user_id):
            raise BookingForbiddenError("cancel")
        if booking.status is BookingStatus.FAILED:
            raise BookingNotCancellableError("Failed bookings cannot be cancelled")

        cancelled = self._bookings.transition(
            booking.id,
            BookingStatus.CANCELLED,
            from_statuses=(BookingStatus.PENDING, BookingStatus.CONFIRMED),
        )
        if cancelled is None:
            raise BookingNotCancellableError()
        logger.info("User %s cancelled booking %s", user_id, booking.id)
        return cancelled

    def verify_ticket(
        self,
        booking_id: str,
        ticket_number: str,
        viewer_id: UUID,
        is_admin: bool = False,
    ) -> TicketCheck:
        """Check a ticket number against its booking.

        Visible to the booking owner, the event's organizer and admins.
        """
        booking = self.find_booking(booking_id)
        if not (is_admin or booking.is_owned_by(viewer_id) or booking.event.organizer_id == viewer_id):
            raise BookingForbiddenError("view")
        return TicketCheck(booking=booking, ticket_number=ticket_number)
