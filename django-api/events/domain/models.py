"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from events.domain.value_objects import (
    Capacity,
    EventCategory,
    EventId,
    EventStatus,
    EventType,
    Money,
    ScheduleType,
    TicketTypeId,
)


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    event_id: EventId
    name: str
    price: Money
    quantity: Capacity


@dataclass(frozen=True)
class OrganizerSummary:
    """The organizer fields shown alongside an event."""

    id: UUID
    name: str
    organization: str


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    organizer: OrganizerSummary
    title: str
    category: EventCategory
    schedule_type: ScheduleType
    start_date: datetime
    start_time: str
    end_time: str
    location: str
    description: str
    banner_image: str
    event_type: EventType
    status: EventStatus
    created_at: datetime
    updated_at: datetime
    ticket_types: tuple[TicketType, ...] = ()

    @property
    def is_published(self) -> bool:
        return self.status is EventStatus.PUBLISHED

    def ticket_type(self, name: str) -> TicketType | None:
        for ticket_type in self.ticket_types:
            if ticket_type.name == name:
                return ticket_type
        return None


@dataclass(frozen=True)
class EventDetails:
    """Basic details captured in the first creation step or an edit."""

    title: str
    category: EventCategory
    schedule_type: ScheduleType
    start_date: datetime
    start_time: str
    end_time: str
    location: str
    description: str


@dataclass(frozen=True)
class TicketTypeDraft:
    """A ticket type as submitted, before it has an identity."""

    name: str
    price: Money
    quantity: Capacity
