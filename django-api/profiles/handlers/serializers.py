"""Serializers for attendee profiles."""

from rest_framework import serializers


class UserProfileSerializer(serializers.Serializer):
    """Serializer for UserProfile domain model."""

    user = serializers.CharField(source="account_id")
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    website = serializers.CharField()
    company = serializers.CharField()
    phoneNumber = serializers.CharField(source="phone_number")
    address = serializers.CharField()
    city = serializers.CharField()
    country = serializers.CharField()
    pincode = serializers.CharField()
    profileImage = serializers.CharField(source="profile_image")
    interestedEvents = serializers.ListField(source="interested_event_ids", child=serializers.CharField())
    updatedAt = serializers.DateTimeField(source="updated_at")


class ProfileUpdateSerializer(serializers.Serializer):
    firstName = serializers.CharField(source="first_name", max_length=100, required=False, allow_blank=True)
    lastName = serializers.CharField(source="last_name", max_length=100, required=False, allow_blank=True)
    website = serializers.CharField(max_length=255, required=False, allow_blank=True)
    company = serializers.CharField(max_length=255, required=False, allow_blank=True)
    phoneNumber = serializers.CharField(source="phone_number", max_length=32, required=False, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    pincode = serializers.CharField(max_length=20, required=False, allow_blank=True)


class InterestToggleSerializer(serializers.Serializer):
    eventId = serializers.CharField(
        source="event_id",
        error_messages={"required": "Event ID is required", "blank": "Event ID is required"},
    )
