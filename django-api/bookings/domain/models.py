"""Domain models for bookings."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from bookings.domain.value_objects import BookingId, BookingStatus
from events.domain import EventId, Money


@dataclass(frozen=True)
class BookedEvent:
    """The event fields shown alongside a booking."""

    id: EventId
    organizer_id: UUID
    title: str
    start_date: datetime
    start_time: str
    location: str
    banner_image: str


@dataclass(frozen=True)
class BookingHolder:
    id: UUID
    name: str
    email: str


@dataclass(frozen=True)
class Booking:
    id: BookingId
    user: BookingHolder
    event: BookedEvent
    ticket_type: str
    quantity: int
    total_amount: Money
    status: BookingStatus
    ticket_numbers: tuple[str, ...]
    payment_intent_id: str
    paid_at: datetime | None
    booked_at: datetime

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user.id == user_id


@dataclass(frozen=True)
class NewBooking:
    """A booking about to be stored; its tickets are reserved on creation."""

    user_id: UUID
    event_id: EventId
    ticket_type: str
    quantity: int
    total_amount: Money
    status: BookingStatus
    ticket_numbers: tuple[str, ...]
