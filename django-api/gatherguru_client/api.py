"""Typed wrappers over the REST routes, returning the envelope ``data``."""

from typing import Any

from gatherguru_client.auth import UserInfo
from gatherguru_client.http import ApiClient
from gatherguru_client.preferences import CurrentBooking
from gatherguru_client.roles import Role

LOGIN_ROUTES = {
    Role.USER: "/api/auth/login",
    Role.ORGANIZER: "/api/auth/organizer/login",
    Role.ADMIN: "/api/auth/admin/login",
}

LOGOUT_ROUTES = {
    Role.USER: "/api/auth/logout",
    Role.ORGANIZER: "/api/auth/organizer/logout",
    Role.ADMIN: "/api/auth/admin/logout",
}

ACCOUNT_ROUTES = {
    Role.USER: "/api/auth/profile",
    Role.ORGANIZER: "/api/auth/organizer/profile",
    Role.ADMIN: "/api/auth/admin/profile",
}


class GatherGuruApi:
    def __init__(self, client: ApiClient, current_booking: CurrentBooking | None = None) -> None:
        self.client = client
        self.current_booking = current_booking

    # Auth

    def login(self, email: str, password: str, role: Role = Role.USER) -> UserInfo:
        """Sign in and start a session with the returned token."""
        body = self.client.post(LOGIN_ROUTES[role], json={"email": email, "password": password})
        user = UserInfo.from_payload(body.get("data") or {})
        self.client.session.login(body["token"], role, user)
        return user

    def register(self, name: str, email: str, password: str, phone: str = "") -> UserInfo:
        body = self.client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password, "phone": phone},
        )
        user = UserInfo.from_payload(body.get("data") or {})
        self.client.session.login(body["token"], Role.USER, user)
        return user

    def register_organizer(self, name: str, email: str, password: str, phone: str, organization: str) -> UserInfo:
        body = self.client.post(
            "/api/auth/organizer/register",
            json={
                "name": name,
                "email": email,
                "password": password,
                "phone": phone,
                "organization": organization,
            },
        )
        user = UserInfo.from_payload(body.get("data") or {})
        self.client.session.login(body["token"], Role.ORGANIZER, user)
        return user

    def logout(self) -> None:
        """End the session locally even if the server call fails."""
        role = self.client.session.state.role or Role.USER
        try:
            self.client.get(LOGOUT_ROUTES[role])
        finally:
            self.client.session.logout()

    def _account_route(self) -> str:
        return ACCOUNT_ROUTES[self.client.session.state.role or Role.USER]

    def get_account(self) -> dict:
        """Signed-in account for the current role."""
        return self.client.get(self._account_route())["data"]

    def update_account(self, **fields: Any) -> dict:
        account = self.client.put(self._account_route(), json=fields)["data"]
        self.client.session.set_user(name=account.get("name") or "", email=account.get("email") or "")
        return account

    def upload_admin_photo(self, data_url: str) -> str:
        photo = self.client.post("/api/admin/profile/photo", json={"image": data_url})["data"]["profilePhoto"]
        self.client.session.set_user(profile_image=photo or None)
        return photo

    # Organizer events

    def create_event(
        self,
        title: str,
        category: str,
        start_date: str,
        start_time: str,
        location: str,
        description: str,
        schedule_type: str = "single",
        end_time: str = "",
    ) -> dict:
        """Create a draft event from the details step."""
        return self.client.post(
            "/api/events",
            json={
                "title": title,
                "category": category,
                "scheduleType": schedule_type,
                "startDate": start_date,
                "startTime": start_time,
                "endTime": end_time,
                "location": location,
                "description": description,
            },
        )["data"]

    def update_banner(self, event_id: str, data_url: str) -> str:
        return self.client.patch(f"/api/events/{event_id}/banner", json={"bannerImage": data_url})["data"]["bannerImage"]

    def update_ticketing(self, event_id: str, event_type: str, tickets: list[dict] | None = None) -> dict:
        """Replace the ticket types; each ticket is a ``name``/``price``/``quantity`` dict."""
        return self.client.patch(
            f"/api/events/{event_id}/ticketing",
            json={"eventType": event_type, "ticketing": tickets or []},
        )["data"]

    def publish_event(self, event_id: str) -> dict:
        return self.client.patch(f"/api/events/{event_id}/publish")["data"]

    def organizer_events(self) -> list[dict]:
        return self.client.get("/api/events/organizer/events")["data"]

    def get_event_for_edit(self, event_id: str) -> dict:
        return self.client.get(f"/api/events/edit/{event_id}")["data"]

    def edit_event(self, event_id: str, **changes: Any) -> dict:
        """Send only the camelCase fields being changed."""
        return self.client.put(f"/api/events/{event_id}", json=changes)["data"]

    # Events

    def categories(self) -> list[dict]:
        return self.client.get("/api/events/categories")["data"]

    def popular_events(self) -> list[dict]:
        return self.client.get("/api/events/popular")["data"]

    def upcoming_events(self) -> list[dict]:
        return self.client.get("/api/events/upcoming")["data"]

    def events_by_category(self, category: str) -> list[dict]:
        return self.client.get(f"/api/events/category/{category}")["data"]

    def search_events(self, query: str) -> list[dict]:
        return self.client.get("/api/events/search", params={"query": query})["data"]

    def list_events(self, category: str = "", price_range: str = "", date_range: str = "") -> list[dict]:
        params = {"category": category, "priceRange": price_range, "dateRange": date_range}
        return self.client.get("/api/events/all", params={k: v for k, v in params.items() if v})["data"]

    def get_event(self, event_id: str) -> dict:
        return self.client.get(f"/api/events/{event_id}")["data"]

    # Bookings

    def create_booking(self, event_id: str, ticket_type: str, quantity: int) -> dict:
        return self.client.post(
            "/api/bookings",
            json={"eventId": event_id, "ticketType": ticket_type, "quantity": quantity},
        )["data"]

    def my_bookings(self) -> list[dict]:
        return self.client.get("/api/bookings/my-bookings")["data"]

    def get_booking(self, booking_id: str) -> dict:
        return self.client.get(f"/api/bookings/{booking_id}")["data"]

    def cancel_booking(self, booking_id: str) -> dict:
        return self.client.put(f"/api/bookings/{booking_id}/cancel")["data"]

    def verify_ticket(self, booking_id: str, ticket_number: str) -> dict:
        return self.client.get(f"/api/bookings/{booking_id}/tickets/{ticket_number}")["data"]

    # Payments

    def create_payment_intent(self, booking_id: str) -> dict:
        if self.current_booking is not None:
            self.current_booking.set(booking_id)
        return self.client.post("/api/payments/create-payment-intent", json={"bookingId": booking_id})["data"]

    def confirm_payment(self, payment_intent_id: str, booking_id: str) -> dict:
        booking = self.client.post(
            "/api/payments/confirm-payment",
            json={"paymentIntentId": payment_intent_id, "bookingId": booking_id},
        )["data"]
        if self.current_booking is not None:
            self.current_booking.clear()
        return booking

    def payment_status(self, payment_intent_id: str) -> dict:
        return self.client.get(f"/api/payments/payment-status/{payment_intent_id}")["data"]

    # Stripe intents not tied to a booking

    def create_intent(self, amount: float, currency: str = "usd", metadata: dict[str, str] | None = None) -> dict:
        return self.client.post(
            "/api/stripe/create-payment-intent",
            json={"amount": amount, "currency": currency, "metadata": metadata or {}},
        )["data"]

    def confirm_intent(self, payment_intent_id: str) -> dict:
        return self.client.post("/api/stripe/confirm-payment", json={"paymentIntentId": payment_intent_id})["data"]

    def intent_status(self, payment_intent_id: str) -> dict:
        return self.client.get(f"/api/stripe/payment-status/{payment_intent_id}")["data"]

    def create_refund(self, payment_intent_id: str, amount: float | None = None, reason: str = "") -> dict:
        body: dict[str, Any] = {"paymentIntentId": payment_intent_id}
        if amount is not None:
            body["amount"] = amount
        if reason:
            body["reason"] = reason
        return self.client.post("/api/stripe/create-refund", json=body)["data"]

    # Profile

    def get_profile(self) -> dict:
        return self.client.get("/api/profile/me")["data"]

    def update_profile(self, **fields: Any) -> dict:
        return self.client.put("/api/profile/update", json=fields)["data"]

    def upload_profile_image(self, data_url: str) -> str:
        return self.client.post("/api/profile/upload-image", json={"image": data_url})["imageUrl"]

    def delete_profile_image(self) -> None:
        self.client.delete("/api/profile/image")
        self.client.session.set_user(profile_image=None)

    def toggle_interest(self, event_id: str) -> bool:
        return self.client.post("/api/profile/toggle-interest", json={"eventId": event_id})["data"]["interested"]

    def interested_events(self) -> list[dict]:
        return self.client.get("/api/profile/interested-events")["data"]

    # Admin dashboard

    def dashboard_stats(self) -> dict:
        return self.client.get("/api/admin/dashboard/stats")["data"]

    def user_stats(self) -> dict:
        return self.client.get("/api/admin/users/stats")["data"]

    def revenue_stats(self) -> dict:
        return self.client.get("/api/admin/revenue/stats")["data"]

    def ticket_stats(self) -> list[dict]:
        return self.client.get("/api/admin/tickets/stats")["data"]

    # Admin users and events

    def list_users(self) -> list[dict]:
        return self.client.get("/api/admin/users")["data"]

    def get_user(self, user_id: str) -> dict:
        """Attendee account with its bookings."""
        return self.client.get(f"/api/admin/users/{user_id}")["data"]

    def set_user_status(self, user_id: str, status: str) -> dict:
        return self.client.patch(f"/api/admin/users/{user_id}/status", json={"status": status})["data"]

    def delete_user(self, user_id: str) -> None:
        self.client.delete(f"/api/admin/users/{user_id}")

    def admin_upcoming_events(self) -> list[dict]:
        return self.client.get("/api/events/admin/upcoming")["data"]

    def admin_past_events(self) -> list[dict]:
        return self.client.get("/api/events/admin/past")["data"]
