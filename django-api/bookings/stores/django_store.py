"""Django ORM implementation of the BookingStore."""

import logging
from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from bookings import models
from bookings.domain import (
    BookedEvent,
    Booking,
    BookingHolder,
    BookingId,
    BookingStatus,
    NewBooking,
)
from bookings.domain.errors import NotEnoughTicketsError
from bookings.stores.interfaces import BookingStore
from events.cache import invalidate_event
from events.domain import EventId, Money
from events.models import TicketType

logger = logging.getLogger(__name__)


def to_domain(row: models.Booking) -> Booking:
    event = row.event
    user = row.user
    return Booking(
        id=BookingId(row.id),
        user=BookingHolder(id=user.id, name=user.name, email=user.email),
        event=BookedEvent(
            id=EventId(event.id),
            organizer_id=event.organizer_id,
            title=event.title,
            start_date=event.start_date,
            start_time=event.start_time,
            location=event.location,
            banner_image=event.banner_image,
        ),
        ticket_type=row.ticket_type,
        quantity=row.quantity,
        total_amount=Money(row.total_amount),
        status=BookingStatus(row.status),
        ticket_numbers=tuple(row.ticket_numbers),
        payment_intent_id=row.payment_intent_id,
        paid_at=row.paid_at,
        booked_at=row.booked_at,
    )


def _tickets(event_id: UUID, ticket_type: str):
    return TicketType.objects.filter(event_id=event_id, name=ticket_type)


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def _base(self):
        return models.Booking.objects.select_related("user", "event")

    def create_booking(self, new_booking: NewBooking) -> Booking:
        event_id = new_booking.event_id.value
        with transaction.atomic():
            # Conditional decrement: concurrent bookings cannot oversell.
            reserved = _tickets(event_id, new_booking.ticket_type).filter(
                quantity__gte=new_booking.quantity
            ).update(quantity=F("quantity") - new_booking.quantity)
            if not reserved:
                raise NotEnoughTicketsError()
            row = models.Booking.objects.create(
                user_id=new_booking.user_id,
                event_id=event_id,
                ticket_type=new_booking.ticket_type,
                quantity=new_booking.quantity,
                total_amount=new_booking.total_amount.amount,
                status=new_booking.status.value,
                ticket_numbers=list(new_booking.ticket_numbers),
            )
        # update() bypasses model signals
        invalidate_event(event_id)
        return self.get_booking(BookingId(row.id))

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        row = self._base().filter(id=booking_id.value).first()
        return to_domain(row) if row else None

    def list_for_user(self, user_id: UUID) -> list[Booking]:
        rows = self._base().filter(user_id=user_id).order_by("-booked_at")
        return [to_domain(row) for row in rows]

    def transition(
        self,
        booking_id: BookingId,
        to: BookingStatus,
        from_statuses: Iterable[BookingStatus],
        payment_intent_id: str | None = None,
        paid_at: datetime | None = None,
    ) -> Booking | None:
        values: dict = {"status": to.value, "updated_at": timezone.now()}
        if payment_intent_id is not None:
            values["payment_intent_id"] = payment_intent_id
        if paid_at is not None:
            values["paid_at"] = paid_at

        with transaction.atomic():
            row = (
                models.Booking.objects.select_for_update()
                .filter(id=booking_id.value, status__in=[s.value for s in from_statuses])
                .first()
            )
            if row is None:
                return None
            releases = BookingStatus(row.status).holds_tickets and not to.holds_tickets
            models.Booking.objects.filter(id=row.id).update(**values)
            if releases:
                _tickets(row.event_id, row.ticket_type).update(
                    quantity=F("quantity") + row.quantity
                )

        if releases:
            invalidate_event(row.event_id)
            logger.info("Released %d %s tickets from booking %s", row.quantity, row.ticket_type, row.id)
        return self.get_booking(booking_id)
