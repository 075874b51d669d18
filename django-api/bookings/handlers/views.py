"""HTTP handlers for attendee bookings."""

from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain import Role
from accounts.permissions import IsActiveAccount, IsAttendee
from bookings.handlers.serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    TicketCheckSerializer,
)
from bookings.services.booking_service import BookingService
from bookings.stores.django_store import DjangoBookingStore
from common.responses import created, ok
from events.stores.django_store import DjangoEventStore


def get_booking_service() -> BookingService:
    return BookingService(DjangoBookingStore(), DjangoEventStore())


class BookingCreateView(APIView):
    """Handler for POST /api/bookings"""

    permission_classes = [IsAttendee, IsActiveAccount]

    def post(self, request: Request) -> Response:
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_booking_service().create_booking(
            request.user.id.value, **serializer.validated_data
        )
        return created(BookingSerializer(booking).data, message="Booking created successfully")


class MyBookingsView(APIView):
    """Handler for GET /api/bookings/my-bookings"""

    permission_classes = [IsAttendee]

    def get(self, request: Request) -> Response:
        bookings = get_booking_service().list_for_user(request.user.id.value)
        return ok(BookingSerializer(bookings, many=True).data)


class BookingDetailView(APIView):
    """Handler for GET /api/bookings/{booking_id}"""

    permission_classes = [IsAttendee]

    def get(self, request: Request, booking_id: str) -> Response:
        booking = get_booking_service().get_booking(booking_id, request.user.id.value)
        return ok(BookingSerializer(booking).data)


class BookingCancelView(APIView):
    """Handler for PUT /api/bookings/{booking_id}/cancel"""

    permission_classes = [IsAttendee, IsActiveAccount]

    def put(self, request: Request, booking_id: str) -> Response:
        booking = get_booking_service().cancel_booking(booking_id, request.user.id.value)
        return ok(BookingSerializer(booking).data, message="Booking cancelled successfully")


class TicketVerificationView(APIView):
    """Handler for GET /api/bookings/{booking_id}/tickets/{ticket_number}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, booking_id: str, ticket_number: str) -> Response:
        check = get_booking_service().verify_ticket(
            booking_id,
            ticket_number,
            viewer_id=request.user.id.value,
            is_admin=request.user.role is Role.ADMIN,
        )
        return ok(TicketCheckSerializer(check).data)
