"""Payment service - booking payments, generic charges and webhook handling.

Booking amounts always come from the stored booking, never from the client.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from django.utils import timezone

from bookings.domain import Booking, BookingStatus
from bookings.domain.errors import (
    BookingForbiddenError,
    BookingNotFoundError,
    InvalidBookingIdError,
)
from bookings.services.booking_service import parse_booking_id
from bookings.stores.interfaces import BookingStore
from payments.domain import PaymentIntent, Refund, WebhookEvent
from payments.domain.errors import (
    BookingAlreadyPaidError,
    BookingNotPayableError,
    InvalidAmountError,
    PaymentMismatchError,
    PaymentNotConfiguredError,
    PaymentNotSuccessfulError,
)
from payments.gateways.interfaces import PaymentGateway

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "usd"


def to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1")))


class PaymentService:
    def __init__(
        self,
        gateway: PaymentGateway,
        booking_store: BookingStore,
        min_charge_cents: int = 50,
        now: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._gateway = gateway
        self._bookings = booking_store
        self._min_charge_cents = min_charge_cents
        self._now = now

    def _require_gateway(self) -> PaymentGateway:
        if not self._gateway.is_configured:
            raise PaymentNotConfiguredError()
        return self._gateway

    def _own_booking(self, booking_id: str, user_id: UUID) -> Booking:
        booking = self._bookings.get_booking(parse_booking_id(booking_id))
        if booking is None:
            raise BookingNotFoundError()
        if not booking.is_owned_by(user_id):
            raise BookingForbiddenError("pay for")
        return booking

    # Booking payments

    def create_booking_intent(self, booking_id: str, user_id: UUID, currency: str = DEFAULT_CURRENCY) -> PaymentIntent:
        """Open a payment for a pending booking's total.

        Raises:
            BookingAlreadyPaidError: If the booking is already confirmed.
            BookingNotPayableError: If the booking was cancelled or failed.
            InvalidAmountError: If the total is below the minimum charge.
        """
        gateway = self._require_gateway()
        booking = self._own_booking(booking_id, user_id)
        if booking.status is BookingStatus.CONFIRMED:
            raise BookingAlreadyPaidError()
        if booking.status is not BookingStatus.PENDING:
            raise BookingNotPayableError(booking.status.value)

        amount_cents = booking.total_amount.cents
        if amount_cents < self._min_charge_cents:
            raise InvalidAmountError(f"Amount must be at least ${self._min_charge_cents / 100:.2f}")

        return gateway.create_intent(
            amount_cents,
            currency,
            metadata={
                "bookingId": str(booking.id),
                "eventId": str(booking.event.id),
                "userId": str(user_id),
                "ticketQuantity": str(booking.quantity),
                "ticketType": booking.ticket_type,
            },
        )

    def confirm_booking_payment(self, booking_id: str, payment_intent_id: str, user_id: UUID) -> Booking:
        """Confirm a booking once its payment intent has succeeded.

        Idempotent: a booking already confirmed by the same intent (for
        example by the webhook) is returned as is.
        """
        gateway = self._require_gateway()
        booking = self._own_booking(booking_id, user_id)
        intent = gateway.retrieve_intent(payment_intent_id)
        if not intent.succeeded:
            raise PaymentNotSuccessfulError(intent.status)
        if intent.metadata.get("bookingId", str(booking.id)) != str(booking.id):
            raise PaymentMismatchError()
        if intent.amount_cents != booking.total_amount.cents:
            raise PaymentMismatchError()

        if booking.status is BookingStatus.CONFIRMED and booking.payment_intent_id == intent.id:
            return booking
        confirmed = self._confirm(booking, intent.id)
        if confirmed is None:
            raise BookingNotPayableError(booking.status.value)
        return confirmed

    def _confirm(self, booking: Booking, payment_intent_id: str) -> Booking | None:
        confirmed = self._bookings.transition(
            booking.id,
            BookingStatus.CONFIRMED,
            from_statuses=(BookingStatus.PENDING,),
            payment_intent_id=payment_intent_id,
            paid_at=self._now(),
        )
        if confirmed is not None:
            logger.info("Booking %s paid with %s", booking.id, payment_intent_id)
        return confirmed

    def payment_status(self, payment_intent_id: str) -> PaymentIntent:
        return self._require_gateway().retrieve_intent(payment_intent_id)

    def handle_webhook(self, payload: bytes, signature: str) -> WebhookEvent:
        """Verify a provider notification and apply it to its booking.

        Unknown event types and events without a booking are acknowledged
        and ignored.
        """
        event = self._gateway.parse_webhook(payload, signature)
        booking_id = event.metadata.get("bookingId")
        if not booking_id:
            logger.info("Webhook %s carries no booking", event.type)
            return event

        try:
            booking = self._bookings.get_booking(parse_booking_id(booking_id))
        except InvalidBookingIdError:
            logger.warning("Webhook %s references malformed booking id %r", event.type, booking_id)
            return event
        if booking is None:
            logger.warning("Webhook %s references unknown booking %s", event.type, booking_id)
            return event

        if event.type == "payment_intent.succeeded":
            self._confirm(booking, event.payload.get("id", ""))
        elif event.type == "checkout.session.completed":
            self._confirm(booking, event.payload.get("payment_intent") or "")
        elif event.type == "payment_intent.payment_failed":
            failed = self._bookings.transition(
                booking.id,
                BookingStatus.FAILED,
                from_statuses=(BookingStatus.PENDING,),
                payment_intent_id=event.payload.get("id", ""),
            )
            if failed is not None:
                logger.info("Booking %s payment failed", booking.id)
        else:
            logger.info("Unhandled webhook event type %s", event.type)
        return event

    # Generic charges

    def create_intent(
        self,
        amount: Decimal,
        currency: str = DEFAULT_CURRENCY,
        metadata: Mapping[str, str] | None = None,
    ) -> PaymentIntent:
        if amount <= 0:
            raise InvalidAmountError()
        amount_cents = to_cents(amount)
        if amount_cents < self._min_charge_cents:
            raise InvalidAmountError(f"Amount must be at least ${self._min_charge_cents / 100:.2f}")
        return self._require_gateway().create_intent(amount_cents, currency, metadata or {})

    def confirm_intent(self, payment_intent_id: str) -> PaymentIntent:
        intent = self._require_gateway().retrieve_intent(payment_intent_id)
        if not intent.succeeded:
            raise PaymentNotSuccessfulError(intent.status, message="Payment not completed")
        return intent

    def refund(self, payment_intent_id: str, amount: Decimal | None = None, reason: str = "requested_by_customer") -> Refund:
        amount_cents = to_cents(amount) if amount is not None else None
        if amount_cents is not None and amount_cents <= 0:
            raise InvalidAmountError()
        return self._require_gateway().refund(payment_intent_id, amount_cents, reason)
