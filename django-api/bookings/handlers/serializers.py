"""Serializers for booking requests and responses."""

from rest_framework import serializers

MISSING_FIELDS = "Please provide all required fields"


class BookingHolderSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.EmailField()


class BookedEventSerializer(serializers.Serializer):
    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    startDate = serializers.DateTimeField(source="start_date")
    startTime = serializers.CharField(source="start_time")
    location = serializers.CharField()
    bannerImage = serializers.CharField(source="banner_image")


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField(source="id.value")
    user = BookingHolderSerializer()
    event = BookedEventSerializer()
    ticketType = serializers.CharField(source="ticket_type")
    quantity = serializers.IntegerField()
    totalAmount = serializers.DecimalField(
        source="total_amount.amount", max_digits=10, decimal_places=2, coerce_to_string=False
    )
    status = serializers.CharField(source="status.value")
    ticketNumbers = serializers.ListField(source="ticket_numbers", child=serializers.CharField())
    paymentIntentId = serializers.CharField(source="payment_intent_id")
    paidAt = serializers.DateTimeField(source="paid_at", allow_null=True)
    bookingDate = serializers.DateTimeField(source="booked_at")


class BookingCreateSerializer(serializers.Serializer):
    eventId = serializers.CharField(
        source="event_id", error_messages={"required": MISSING_FIELDS, "blank": MISSING_FIELDS}
    )
    ticketType = serializers.CharField(
        source="ticket_type", error_messages={"required": MISSING_FIELDS, "blank": MISSING_FIELDS}
    )
    quantity = serializers.IntegerField(
        min_value=1,
        max_value=100,
        error_messages={"required": MISSING_FIELDS, "null": MISSING_FIELDS},
    )


class TicketCheckSerializer(serializers.Serializer):
    ticketNumber = serializers.CharField(source="ticket_number")
    isValid = serializers.BooleanField(source="is_valid")
    booking = BookingSerializer()
