"""Domain primitives for bookings."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


class BookingStatus(Enum):
    """Booking lifecycle.

    Free bookings start confirmed; paid bookings start pending and become
    confirmed or failed once the payment settles. Cancelled and failed
    bookings no longer hold tickets.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    FAILED = "failed"

    @property
    def holds_tickets(self) -> bool:
        return self in (BookingStatus.PENDING, BookingStatus.CONFIRMED)
