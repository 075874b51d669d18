"""Integration tests for registration, login and account management.

Run with: pytest tests/test_accounts.py -v
"""

from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from accounts.domain import AccountStatus, Role
from accounts.models import Account
from fakes import PASSWORD, PNG_DATA_URL


@pytest.mark.django_db
class TestRegistration:
    def test_register_attendee_returns_token_and_cookie(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Ada", "email": "ada@example.com", "password": PASSWORD},
            format="json",
        )
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["role"] == "user"
        assert body["data"]["email"] == "ada@example.com"
        assert "password" not in body["data"]
        assert response.cookies["token"].value == body["token"]

    def test_duplicate_email_is_rejected(self, api_client: APIClient, attendee):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Again", "email": attendee.email, "password": PASSWORD},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["message"] == "User already exists"

    def test_same_email_may_register_as_organizer(self, api_client: APIClient, attendee):
        response = api_client.post(
            "/api/organizer/register",
            {
                "name": "Org",
                "email": attendee.email,
                "password": PASSWORD,
                "phone": "555-0101",
                "organization": "Acme",
            },
            format="json",
        )
        assert response.status_code == 201
        assert response.json()["data"]["role"] == "organizer"

    def test_duplicate_organizer(self, api_client: APIClient, organizer):
        response = api_client.post(
            "/api/auth/organizer/register",
            {
                "name": "Org",
                "email": organizer.email,
                "password": PASSWORD,
                "phone": "555-0101",
                "organization": "Acme",
            },
            format="json",
        )
        assert response.json()["message"] == "Organizer already exists"

    def test_short_password_is_rejected(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Ada", "email": "ada@example.com", "password": "123"},
            format="json",
        )
        assert response.status_code == 400
        assert "password" in response.json()["errors"]

    def test_admin_registration_disabled_by_default(self, api_client: APIClient):
        response = api_client.post(
            "/api/admin/register", {"email": "root@example.com", "password": PASSWORD}, format="json"
        )
        assert response.status_code == 403
        assert response.json()["message"] == "Admin registration is disabled"

    def test_admin_registration_when_enabled(self, api_client: APIClient, settings):
        settings.ALLOW_ADMIN_REGISTRATION = True
        response = api_client.post(
            "/api/admin/register", {"email": "root@example.com", "password": PASSWORD}, format="json"
        )
        assert response.status_code == 201
        assert response.json()["data"]["role"] == "admin"


@pytest.mark.django_db
class TestLogin:
    def test_login_success(self, api_client: APIClient, attendee):
        response = api_client.post(
            "/api/auth/login", {"email": attendee.email, "password": PASSWORD}, format="json"
        )
        assert response.status_code == 200
        body = response.json()
        assert body["data"]["id"] == str(attendee.id)
        assert body["token"]

    def test_token_authenticates_later_requests(self, api_client: APIClient, attendee):
        token = api_client.post(
            "/api/auth/login", {"email": attendee.email, "password": PASSWORD}, format="json"
        ).json()["token"]
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        assert client.get("/api/auth/profile").json()["data"]["email"] == attendee.email

    def test_cookie_authenticates_later_requests(self, api_client: APIClient, attendee):
        api_client.post("/api/auth/login", {"email": attendee.email, "password": PASSWORD}, format="json")
        assert api_client.get("/api/auth/profile").status_code == 200

    def test_wrong_password(self, api_client: APIClient, attendee):
        response = api_client.post(
            "/api/auth/login", {"email": attendee.email, "password": "wrong-one"}, format="json"
        )
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid email or password"}

    def test_missing_credentials(self, api_client: APIClient):
        response = api_client.post("/api/auth/login", {"email": "a@example.com"}, format="json")
        assert response.status_code == 400
        assert response.json()["message"] == "Please provide email and password"

    def test_attendee_cannot_use_organizer_login(self, api_client: APIClient, attendee):
        response = api_client.post(
            "/api/auth/organizer/login", {"email": attendee.email, "password": PASSWORD}, format="json"
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    @pytest.mark.parametrize("status", [AccountStatus.BLOCKED, AccountStatus.INACTIVE])
    def test_disabled_account_cannot_login(self, api_client: APIClient, make_account, status):
        account = make_account(Role.USER, status=status)
        response = api_client.post(
            "/api/auth/login", {"email": account.email, "password": PASSWORD}, format="json"
        )
        assert response.status_code == 403
        assert response.json()["status"] == status.value

    def test_invalid_token_is_rejected(self, api_client: APIClient):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-jwt")
        response = api_client.get("/api/auth/profile")
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    def test_logout_clears_cookie(self, user_api: APIClient):
        response = user_api.post("/api/auth/logout")
        assert response.status_code == 200
        assert response.cookies["token"].value == ""


@pytest.mark.django_db
class TestOwnProfile:
    def test_attendee_profile_has_image_field(self, user_api: APIClient, attendee):
        data = user_api.get("/api/auth/profile").json()["data"]
        assert data["name"] == attendee.name
        assert data["profileImage"] is None

    def test_update_ignores_blank_and_foreign_fields(self, organizer_api: APIClient, organizer):
        response = organizer_api.put(
            "/api/organizer/profile",
            {"name": "", "organization": "Globex", "email": "new@example.com"},
            format="json",
        )
        data = response.json()["data"]
        assert data["organization"] == "Globex"
        assert data["name"] == organizer.name
        assert data["email"] == organizer.email

    def test_organizer_profile_requires_organizer(self, user_api: APIClient):
        response = user_api.get("/api/organizer/profile")
        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to access this route"

    def test_admin_photo_upload(self, admin_api: APIClient, media_root):
        response = admin_api.post("/api/admin/profile/photo", {"image": PNG_DATA_URL}, format="json")
        assert response.status_code == 200
        assert response.json()["data"]["profilePhoto"].startswith("/media/admin-profiles/")

    def test_admin_photo_requires_image(self, admin_api: APIClient):
        response = admin_api.post("/api/admin/profile/photo", {}, format="json")
        assert response.status_code == 400
        assert response.json()["message"] == "No image provided"


@pytest.mark.django_db
class TestAttendeeManagement:
    def test_list_attendees_only(self, admin_api: APIClient, attendee, organizer):
        body = admin_api.get("/api/admin/users").json()
        assert body["count"] == 1
        assert body["data"][0]["id"] == str(attendee.id)

    def test_attendee_detail_includes_bookings(self, admin_api: APIClient, attendee):
        data = admin_api.get(f"/api/admin/users/{attendee.id}").json()["data"]
        assert data["email"] == attendee.email
        assert data["bookings"] == []

    def test_detail_of_organizer_is_not_found(self, admin_api: APIClient, organizer):
        response = admin_api.get(f"/api/admin/users/{organizer.id}")
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_invalid_id(self, admin_api: APIClient):
        response = admin_api.get("/api/admin/users/abc")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid ID format"

    def test_block_attendee(self, admin_api: APIClient, attendee):
        response = admin_api.patch(
            f"/api/admin/users/{attendee.id}/status", {"status": "blocked"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["message"] == "User status updated to blocked"
        assert Account.objects.get(id=attendee.id.value).status == "blocked"

    def test_unknown_status_rejected(self, admin_api: APIClient, attendee):
        response = admin_api.patch(
            f"/api/admin/users/{attendee.id}/status", {"status": "banished"}, format="json"
        )
        assert response.status_code == 400

    def test_delete_attendee(self, admin_api: APIClient, attendee):
        response = admin_api.delete(f"/api/admin/users/{attendee.id}")
        assert response.status_code == 200
        assert not Account.objects.filter(id=attendee.id.value).exists()
        assert admin_api.delete(f"/api/admin/users/{uuid4()}").status_code == 404

    def test_non_admin_cannot_list(self, organizer_api: APIClient):
        assert organizer_api.get("/api/admin/users").status_code == 403

    def test_blocked_token_cannot_book(self, admin_api: APIClient, attendee, user_api: APIClient):
        admin_api.patch(f"/api/admin/users/{attendee.id}/status", {"status": "blocked"}, format="json")
        response = user_api.post(
            "/api/bookings", {"eventId": str(uuid4()), "ticketType": "General", "quantity": 1}, format="json"
        )
        assert response.status_code == 403
        assert response.json()["status"] == "blocked"
