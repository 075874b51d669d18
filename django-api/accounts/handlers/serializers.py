"""Serializers for account requests and responses."""

from rest_framework import serializers

from accounts.domain import AccountStatus


class AccountSerializer(serializers.Serializer):
    """Serializer for Account domain model."""

    id = serializers.CharField(source="id.value")
    role = serializers.CharField(source="role.value")
    name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()
    organization = serializers.CharField()
    isVerified = serializers.BooleanField(source="is_verified")
    status = serializers.CharField(source="status.value")
    profilePhoto = serializers.CharField(source="profile_photo")
    createdAt = serializers.DateTimeField(source="created_at")


class AttendeeRegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, trim_whitespace=True)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(min_length=6, write_only=True)
    phone = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")


class OrganizerRegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(min_length=6, write_only=True)
    phone = serializers.CharField(max_length=32)
    organization = serializers.CharField(max_length=255)


class AdminRegisterSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(min_length=6, write_only=True)
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    email = serializers.EmailField(max_length=255, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=32, required=False, allow_blank=True)
    organization = serializers.CharField(max_length=255, required=False, allow_blank=True)


class ImageUploadSerializer(serializers.Serializer):
    image = serializers.CharField(error_messages={"required": "No image provided", "blank": "No image provided"})


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[s.value for s in AccountStatus])

    def validate_status(self, value: str) -> AccountStatus:
        return AccountStatus(value)
