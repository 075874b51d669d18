"""Domain error codes for the bookings module."""

from enum import Enum

from common.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    NOT_ENOUGH_TICKETS = "NOT_ENOUGH_TICKETS"
    BOOKING_FORBIDDEN = "BOOKING_FORBIDDEN"
    BOOKING_NOT_CANCELLABLE = "BOOKING_NOT_CANCELLABLE"


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    http_status = 404

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_FOUND, message="Booking not found")


class InvalidBookingIdError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_BOOKING_ID, message="Invalid booking ID format")


class TicketTypeNotFoundError(DomainError):
    http_status = 404

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.TICKET_TYPE_NOT_FOUND, message="Ticket type not found")


class NotEnoughTicketsError(DomainError):
    """Raised when fewer tickets remain than were requested."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.NOT_ENOUGH_TICKETS, message="Not enough tickets available")


class BookingForbiddenError(DomainError):
    """Raised when a caller acts on a booking that is not theirs."""

    http_status = 403

    def __init__(self, action: str = "view") -> None:
        super().__init__(
            code=ErrorCode.BOOKING_FORBIDDEN,
            message=f"Not authorized to {action} this booking",
        )


class BookingNotCancellableError(DomainError):
    def __init__(self, message: str = "Booking is already cancelled") -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_CANCELLABLE, message=message)
