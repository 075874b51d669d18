from events.domain.models import Event, EventDetails, OrganizerSummary, TicketType, TicketTypeDraft
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

__all__ = [
    "Event",
    "EventDetails",
    "OrganizerSummary",
    "TicketType",
    "TicketTypeDraft",
    "EventId",
    "TicketTypeId",
    "Money",
    "Capacity",
    "EventCategory",
    "EventStatus",
    "EventType",
    "ScheduleType",
]
