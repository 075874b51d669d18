"""HTTP handlers for Stripe payments.

``/api/payments/*`` pays for bookings; ``/api/stripe/*`` exposes plain
amount charges and refunds.
"""

import logging

from django.conf import settings
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsActiveAccount, IsAttendee
from bookings.handlers.serializers import BookingSerializer
from bookings.stores.django_store import DjangoBookingStore
from common.responses import ok
from payments.gateways.interfaces import PaymentGateway
from payments.gateways.stripe_gateway import StripePaymentGateway
from payments.handlers.serializers import (
    BookingIntentRequestSerializer,
    BookingPaymentConfirmSerializer,
    ClientSecretSerializer,
    IntentConfirmSerializer,
    IntentRequestSerializer,
    IntentStatusSerializer,
    RefundRequestSerializer,
    RefundSerializer,
)
from payments.services.payment_service import PaymentService

logger = logging.getLogger(__name__)


def get_payment_gateway() -> PaymentGateway:
    return StripePaymentGateway()


def get_payment_service() -> PaymentService:
    return PaymentService(
        get_payment_gateway(),
        DjangoBookingStore(),
        min_charge_cents=settings.STRIPE_MIN_CHARGE_CENTS,
    )


class BookingPaymentIntentView(APIView):
    """Handler for POST /api/payments/create-payment-intent"""

    permission_classes = [IsAttendee, IsActiveAccount]

    def post(self, request: Request) -> Response:
        serializer = BookingIntentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        intent = get_payment_service().create_booking_intent(
            serializer.validated_data["booking_id"], request.user.id.value
        )
        return ok(ClientSecretSerializer(intent).data)


class BookingPaymentConfirmView(APIView):
    """Handler for POST /api/payments/confirm-payment"""

    permission_classes = [IsAttendee, IsActiveAccount]

    def post(self, request: Request) -> Response:
        serializer = BookingPaymentConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_payment_service().confirm_booking_payment(
            user_id=request.user.id.value, **serializer.validated_data
        )
        return ok(BookingSerializer(booking).data, message="Payment confirmed successfully")


class BookingPaymentStatusView(APIView):
    """Handler for GET /api/payments/payment-status/{payment_intent_id}"""

    permission_classes = [IsAttendee]

    def get(self, request: Request, payment_intent_id: str) -> Response:
        intent = get_payment_service().payment_status(payment_intent_id)
        return ok(IntentStatusSerializer(intent).data)


@method_decorator(csrf_exempt, name="dispatch")
class WebhookView(APIView):
    """Handler for POST /api/payments/webhook

    Authenticated by the provider signature, not by a user token.
    """

    authentication_classes: list = []
    permission_classes: list = []

    def post(self, request: Request) -> Response:
        event = get_payment_service().handle_webhook(
            request.body, request.META.get("HTTP_STRIPE_SIGNATURE", "")
        )
        logger.info("Processed webhook %s", event.type)
        return Response({"received": True})


class IntentCreateView(APIView):
    """Handler for POST /api/stripe/create-payment-intent"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        serializer = IntentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        intent = get_payment_service().create_intent(**serializer.validated_data)
        return ok(ClientSecretSerializer(intent).data)


class IntentConfirmView(APIView):
    """Handler for POST /api/stripe/confirm-payment"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        serializer = IntentConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        intent = get_payment_service().confirm_intent(serializer.validated_data["payment_intent_id"])
        return ok(IntentStatusSerializer(intent).data, message="Payment confirmed successfully")


class IntentStatusView(APIView):
    """Handler for GET /api/stripe/payment-status/{payment_intent_id}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, payment_intent_id: str) -> Response:
        intent = get_payment_service().payment_status(payment_intent_id)
        return ok(IntentStatusSerializer(intent).data)


class RefundCreateView(APIView):
    """Handler for POST /api/stripe/create-refund"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        serializer = RefundRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        refund = get_payment_service().refund(**serializer.validated_data)
        return ok(RefundSerializer(refund).data, message="Refund created successfully")
