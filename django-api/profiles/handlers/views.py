"""HTTP handlers for the attendee's own profile."""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.serializers import ImageUploadSerializer
from accounts.permissions import IsAttendee
from common.images import get_image_store
from common.responses import ok
from events.handlers.serializers import EventSerializer
from events.stores.django_store import DjangoEventStore
from profiles.handlers.serializers import (
    InterestToggleSerializer,
    ProfileUpdateSerializer,
    UserProfileSerializer,
)
from profiles.services.profile_service import ProfileService
from profiles.stores.django_store import DjangoProfileStore


def get_profile_service() -> ProfileService:
    return ProfileService(
        DjangoProfileStore(),
        image_store=get_image_store(),
        event_store=DjangoEventStore(),
    )


class ProfileView(APIView):
    """Handler for GET /api/profile/me"""

    permission_classes = [IsAttendee]

    def get(self, request: Request) -> Response:
        profile = get_profile_service().get_profile(request.user.id.value)
        return ok(UserProfileSerializer(profile).data)


class ProfileUpdateView(APIView):
    """Handler for PUT /api/profile/update"""

    permission_classes = [IsAttendee]

    def put(self, request: Request) -> Response:
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = get_profile_service().update_profile(request.user.id.value, serializer.validated_data)
        return ok(UserProfileSerializer(profile).data, message="Profile updated successfully")


class ProfileImageUploadView(APIView):
    """Handler for POST /api/profile/upload-image"""

    permission_classes = [IsAttendee]

    def post(self, request: Request) -> Response:
        serializer = ImageUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = get_profile_service().upload_image(
            request.user.id.value, serializer.validated_data["image"]
        )
        return ok(
            message="Profile image uploaded successfully",
            imageUrl=profile.profile_image,
        )


class ProfileImageView(APIView):
    """Handler for DELETE /api/profile/image"""

    permission_classes = [IsAttendee]

    def delete(self, request: Request) -> Response:
        get_profile_service().delete_image(request.user.id.value)
        return ok(message="Profile image deleted successfully")


class InterestToggleView(APIView):
    """Handler for POST /api/profile/toggle-interest"""

    permission_classes = [IsAttendee]

    def post(self, request: Request) -> Response:
        serializer = InterestToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        interested = get_profile_service().toggle_interest(
            request.user.id.value, serializer.validated_data["event_id"]
        )
        return ok({"interested": interested})


class InterestedEventsView(APIView):
    """Handler for GET /api/profile/interested-events"""

    permission_classes = [IsAttendee]

    def get(self, request: Request) -> Response:
        events = get_profile_service().interested_events(request.user.id.value)
        return ok(EventSerializer(events, many=True).data)
