"""HTTP handlers for authentication, own profiles and attendee management.

Handlers parse requests, call services and shape responses; domain errors
are mapped to HTTP responses by the project exception handler.
"""

from django.conf import settings
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain import Account, AccountStatus, NewAccount, Role
from accounts.domain.errors import RegistrationClosedError
from accounts.handlers.serializers import (
    AccountSerializer,
    AdminRegisterSerializer,
    AttendeeRegisterSerializer,
    ImageUploadSerializer,
    OrganizerRegisterSerializer,
    ProfileUpdateSerializer,
    StatusUpdateSerializer,
)
from accounts.permissions import IsAdmin, IsAttendee, IsOrganizer
from accounts.services.account_admin_service import AccountAdminService
from accounts.services.auth_service import AuthService
from accounts.stores.django_store import DjangoAccountStore
from bookings.handlers.serializers import BookingSerializer
from bookings.services.booking_service import BookingService
from bookings.stores.django_store import DjangoBookingStore
from common.images import get_image_store
from common.responses import created, ok
from events.stores.django_store import DjangoEventStore
from profiles.services.profile_service import ProfileService
from profiles.stores.django_store import DjangoProfileStore

COOKIE_MAX_AGE = 30 * 24 * 60 * 60


def get_auth_service() -> AuthService:
    return AuthService(DjangoAccountStore(), image_store=get_image_store())


def set_auth_cookie(response: Response, token: str) -> Response:
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        max_age=COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="None",
        path="/",
    )
    return response


def account_payload(account: Account) -> dict:
    data = dict(AccountSerializer(account).data)
    if account.role is Role.USER:
        profile = ProfileService(DjangoProfileStore()).find_profile(account.id.value)
        data["profileImage"] = profile.profile_image if profile and profile.profile_image else None
    return data


class RegisterView(APIView):
    """Handler for POST register endpoints; ``role`` picks the account kind."""

    authentication_classes: list = []
    role = Role.USER
    serializer_class = AttendeeRegisterSerializer

    def post(self, request: Request) -> Response:
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        new_account = NewAccount(role=self.role, **serializer.validated_data)
        account, token = get_auth_service().register(new_account)
        return set_auth_cookie(created(account_payload(account), token=token), token)


class OrganizerRegisterView(RegisterView):
    role = Role.ORGANIZER
    serializer_class = OrganizerRegisterSerializer


class AdminRegisterView(RegisterView):
    role = Role.ADMIN
    serializer_class = AdminRegisterSerializer

    def post(self, request: Request) -> Response:
        if not settings.ALLOW_ADMIN_REGISTRATION:
            raise RegistrationClosedError()
        return super().post(request)


class LoginView(APIView):
    """Handler for POST login endpoints."""

    authentication_classes: list = []
    role = Role.USER

    def post(self, request: Request) -> Response:
        account, token = get_auth_service().login(
            self.role,
            str(request.data.get("email") or "").strip(),
            str(request.data.get("password") or ""),
        )
        return set_auth_cookie(ok(account_payload(account), token=token), token)


class OrganizerLoginView(LoginView):
    role = Role.ORGANIZER


class AdminLoginView(LoginView):
    role = Role.ADMIN


class LogoutView(APIView):
    """Handler for logout; clears the token cookie."""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        response = ok(message="Logged out successfully")
        response.delete_cookie(settings.AUTH_COOKIE_NAME, path="/", samesite="None")
        return response

    post = get


class ProfileView(APIView):
    """Handler for GET/PUT of the caller's own account profile."""

    permission_classes = [IsAttendee]
    role = Role.USER

    def get(self, request: Request) -> Response:
        account = get_auth_service().get_account(request.user.id, self.role)
        return ok(account_payload(account))

    def put(self, request: Request) -> Response:
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = get_auth_service().update_profile(
            request.user.id, self.role, serializer.validated_data
        )
        return ok(account_payload(account), message="Profile updated successfully")


class OrganizerProfileView(ProfileView):
    permission_classes = [IsOrganizer]
    role = Role.ORGANIZER


class AdminProfileView(ProfileView):
    permission_classes = [IsAdmin]
    role = Role.ADMIN


class AdminPhotoView(APIView):
    """Handler for POST /api/admin/profile/photo"""

    permission_classes = [IsAdmin]

    def post(self, request: Request) -> Response:
        serializer = ImageUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = get_auth_service().update_photo(
            request.user.id, Role.ADMIN, serializer.validated_data["image"], "admin-profiles"
        )
        return ok(
            {"profilePhoto": account.profile_photo},
            message="Profile photo updated successfully",
        )


class AttendeeListView(APIView):
    """Handler for GET /api/admin/users"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        attendees = AccountAdminService(DjangoAccountStore()).list_attendees()
        return ok(AccountSerializer(attendees, many=True).data, count=len(attendees))


class AttendeeDetailView(APIView):
    """Handler for GET/DELETE /api/admin/users/{account_id}"""

    permission_classes = [IsAdmin]

    def get(self, request: Request, account_id: str) -> Response:
        account = AccountAdminService(DjangoAccountStore()).get_attendee(account_id)
        bookings = BookingService(DjangoBookingStore(), DjangoEventStore()).list_for_user(account.id.value)
        data = account_payload(account)
        data["bookings"] = BookingSerializer(bookings, many=True).data
        return ok(data)

    def delete(self, request: Request, account_id: str) -> Response:
        AccountAdminService(DjangoAccountStore()).delete_attendee(account_id)
        return ok(message="User deleted successfully")


class AttendeeStatusView(APIView):
    """Handler for PATCH /api/admin/users/{account_id}/status"""

    permission_classes = [IsAdmin]

    def patch(self, request: Request, account_id: str) -> Response:
        serializer = StatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = AccountAdminService(DjangoAccountStore()).set_status(
            account_id, AccountStatus(serializer.validated_data["status"])
        )
        return ok(AccountSerializer(account).data, message=f"User status updated to {account.status.value}")
