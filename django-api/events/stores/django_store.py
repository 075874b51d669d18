"""Django ORM implementation of the EventStore."""

from uuid import UUID

from django.db import transaction
from django.db.models import Q, QuerySet

from events import models
from events.domain import (
    Capacity,
    Event,
    EventCategory,
    EventDetails,
    EventId,
    EventStatus,
    EventType,
    Money,
    OrganizerSummary,
    ScheduleType,
    TicketType,
    TicketTypeDraft,
    TicketTypeId,
)
from events.stores.interfaces import EventQuery, EventStore, PriceBand

ORDERINGS = {
    "start_date": ("start_date", "created_at"),
    "-start_date": ("-start_date", "-created_at"),
    "-created_at": ("-created_at",),
}

ENUM_FIELDS = (EventCategory, ScheduleType, EventType, EventStatus)


def ticket_type_to_domain(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        price=Money(row.price),
        quantity=Capacity(row.quantity),
    )


def event_to_domain(row: models.Event) -> Event:
    organizer = row.organizer
    return Event(
        id=EventId(row.id),
        organizer=OrganizerSummary(
            id=organizer.id,
            name=organizer.name,
            organization=organizer.organization,
        ),
        title=row.title,
        category=EventCategory(row.category),
        schedule_type=ScheduleType(row.schedule_type),
        start_date=row.start_date,
        start_time=row.start_time,
        end_time=row.end_time,
        location=row.location,
        description=row.description,
        banner_image=row.banner_image,
        event_type=EventType(row.event_type),
        status=EventStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
        ticket_types=tuple(ticket_type_to_domain(t) for t in row.ticket_types.all()),
    )


def _price_filter(band: PriceBand) -> Q:
    condition = Q()
    if band.lower is not None:
        lookup = "gte" if band.lower_inclusive else "gt"
        condition &= Q(**{f"ticket_types__price__{lookup}": band.lower})
    if band.upper is not None:
        lookup = "lte" if band.upper_inclusive else "lt"
        condition &= Q(**{f"ticket_types__price__{lookup}": band.upper})
    return condition


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _base(self) -> QuerySet:
        return models.Event.objects.select_related("organizer").prefetch_related("ticket_types")

    def list_events(self, query: EventQuery) -> list[Event]:
        qs = self._base()
        if query.status is not None:
            qs = qs.filter(status=query.status.value)
        if query.category is not None:
            qs = qs.filter(category=query.category.value)
        if query.organizer_id is not None:
            qs = qs.filter(organizer_id=query.organizer_id)
        if query.event_type is not None:
            qs = qs.filter(event_type=query.event_type.value)
        if query.starts_from is not None:
            qs = qs.filter(start_date__gte=query.starts_from)
        if query.starts_before is not None:
            qs = qs.filter(start_date__lt=query.starts_before)
        if query.ids is not None:
            qs = qs.filter(id__in=query.ids)
        if query.text:
            qs = qs.filter(
                Q(title__icontains=query.text)
                | Q(description__icontains=query.text)
                | Q(location__icontains=query.text)
            )
        if query.price_band is not None:
            qs = qs.filter(_price_filter(query.price_band)).distinct()

        qs = qs.order_by(*ORDERINGS[query.order_by])
        if query.limit is not None:
            qs = qs[: query.limit]
        return [event_to_domain(row) for row in qs]

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._base().filter(id=event_id.value).first()
        return event_to_domain(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(id=event_id.value).exists()

    def create_event(self, organizer_id: UUID, details: EventDetails) -> Event:
        row = models.Event.objects.create(
            organizer_id=organizer_id,
            title=details.title,
            category=details.category.value,
            schedule_type=details.schedule_type.value,
            start_date=details.start_date,
            start_time=details.start_time,
            end_time=details.end_time,
            location=details.location,
            description=details.description,
            status=models.Event.Status.DRAFT,
        )
        return self.get_event(EventId(row.id))

    def update_event(self, event_id: EventId, **fields: object) -> Event:
        row = models.Event.objects.get(id=event_id.value)
        for name, value in fields.items():
            setattr(row, name, value.value if isinstance(value, ENUM_FIELDS) else value)
        # save() rather than update() so post_save signals invalidate caches
        row.save()
        return self.get_event(event_id)

    def replace_ticket_types(self, event_id: EventId, ticket_types: list[TicketTypeDraft]) -> Event:
        with transaction.atomic():
            models.TicketType.objects.filter(event_id=event_id.value).delete()
            for draft in ticket_types:
                models.TicketType.objects.create(
                    event_id=event_id.value,
                    name=draft.name,
                    price=draft.price.amount,
                    quantity=draft.quantity.value,
                )
        return self.get_event(event_id)

    def count_events(self) -> int:
        return models.Event.objects.count()
