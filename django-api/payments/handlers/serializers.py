"""Serializers for payment requests and responses."""

from rest_framework import serializers

CONFIRM_FIELDS = "Payment intent ID and booking ID are required"


class BookingIntentRequestSerializer(serializers.Serializer):
    bookingId = serializers.CharField(
        source="booking_id", error_messages={"required": "Booking ID is required"}
    )


class BookingPaymentConfirmSerializer(serializers.Serializer):
    bookingId = serializers.CharField(source="booking_id", error_messages={"required": CONFIRM_FIELDS})
    paymentIntentId = serializers.CharField(
        source="payment_intent_id", error_messages={"required": CONFIRM_FIELDS}
    )


class IntentRequestSerializer(serializers.Serializer):
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        error_messages={"required": "Invalid amount", "invalid": "Invalid amount"},
    )
    currency = serializers.CharField(required=False, default="usd")
    metadata = serializers.DictField(child=serializers.CharField(), required=False, default=dict)


class IntentConfirmSerializer(serializers.Serializer):
    paymentIntentId = serializers.CharField(
        source="payment_intent_id", error_messages={"required": "Payment intent ID is required"}
    )


class RefundRequestSerializer(serializers.Serializer):
    paymentIntentId = serializers.CharField(
        source="payment_intent_id", error_messages={"required": "Payment intent ID is required"}
    )
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    reason = serializers.CharField(required=False, default="requested_by_customer")


class ClientSecretSerializer(serializers.Serializer):
    clientSecret = serializers.CharField(source="client_secret")
    paymentIntentId = serializers.CharField(source="id")
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)
    currency = serializers.CharField()


class IntentStatusSerializer(serializers.Serializer):
    id = serializers.CharField()
    status = serializers.CharField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)
    currency = serializers.CharField()
    metadata = serializers.DictField(child=serializers.CharField())


class RefundSerializer(serializers.Serializer):
    refundId = serializers.CharField(source="id")
    status = serializers.CharField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)
    paymentIntentId = serializers.CharField(source="payment_intent_id")
