"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from events.domain import (
    Event,
    EventCategory,
    EventDetails,
    EventId,
    EventStatus,
    EventType,
    TicketTypeDraft,
)


@dataclass(frozen=True)
class PriceBand:
    """Matches events having at least one ticket type priced inside the band."""

    lower: Decimal | None = None
    upper: Decimal | None = None
    lower_inclusive: bool = True
    upper_inclusive: bool = True


@dataclass(frozen=True)
class EventQuery:
    """Filters for listing events. ``None`` means "do not filter"."""

    status: EventStatus | None = None
    category: EventCategory | None = None
    organizer_id: UUID | None = None
    event_type: EventType | None = None
    price_band: PriceBand | None = None
    starts_from: datetime | None = None
    starts_before: datetime | None = None
    text: str | None = None
    ids: frozenset[UUID] | None = None
    order_by: str = "start_date"
    limit: int | None = None


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, query: EventQuery) -> list[Event]:
        """Return events matching the query, ordered by ``query.order_by``."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, organizer_id: UUID, details: EventDetails) -> Event:
        """Persist a new draft event."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, **fields: object) -> Event:
        """Update scalar event fields and return the event."""
        ...

    @abstractmethod
    def replace_ticket_types(self, event_id: EventId, ticket_types: list[TicketTypeDraft]) -> Event:
        """Replace every ticket type of the event."""
        ...

    @abstractmethod
    def count_events(self) -> int:
        ...
