"""Domain error codes for the events module."""

from enum import Enum

from common.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    EVENT_INCOMPLETE = "EVENT_INCOMPLETE"
    EVENT_LOCKED = "EVENT_LOCKED"
    BANNER_REQUIRED = "BANNER_REQUIRED"
    INVALID_FILTER = "INVALID_FILTER"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    http_status = 404

    def __init__(self, message: str = "Event not found") -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=message,
        )


class EventNotOwnedError(EventNotFoundError):
    """Raised when an organizer targets an event that is not theirs.

    Reported as not found so event IDs of other organizers do not leak.
    """

    def __init__(self) -> None:
        super().__init__(message="Event not found or not authorized")


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidCategoryError(DomainError):
    def __init__(self, category: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CATEGORY,
            message=f"Unknown event category: {category}",
        )


class InvalidFilterError(DomainError):
    def __init__(self, name: str, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FILTER,
            message=f"Unknown {name}: {value}",
        )


class BannerRequiredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.BANNER_REQUIRED,
            message="Please provide a banner image",
        )


class EventIncompleteError(DomainError):
    """Raised when publishing an event that is missing required parts."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_INCOMPLETE,
            message="Please complete all event details before publishing",
        )


class EventLockedError(DomainError):
    """Raised when editing restricted fields of a published event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_LOCKED,
            message="Published events can only have title, description, and location updated",
        )
