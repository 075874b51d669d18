"""Pytest configuration and shared fixtures."""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.domain import AccountStatus, NewAccount, Role
from accounts.stores.django_store import DjangoAccountStore
from accounts.tokens import issue_token
from events.models import Event, TicketType
from fakes import PASSWORD


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    settings.MEDIA_URL = "/media/"
    return tmp_path


@pytest.fixture
def make_account(db):
    store = DjangoAccountStore()
    counter = iter(range(1, 10_000))

    def make(role: Role = Role.USER, status: AccountStatus = AccountStatus.ACTIVE, **fields):
        n = next(counter)
        account = store.create(
            NewAccount(
                role=role,
                email=fields.pop("email", f"{role.value}{n}@example.com"),
                password=fields.pop("password", PASSWORD),
                name=fields.pop("name", f"{role.label} {n}"),
                phone=fields.pop("phone", "555-0100"),
                organization=fields.pop("organization", "Acme" if role is Role.ORGANIZER else ""),
            )
        )
        if status is not AccountStatus.ACTIVE:
            account = store.update(account.id, status=status)
        return account

    return make


def authorized(account) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(account)}")
    return client


@pytest.fixture
def client_for():
    return authorized


@pytest.fixture
def attendee(make_account):
    return make_account(Role.USER)


@pytest.fixture
def organizer(make_account):
    return make_account(Role.ORGANIZER)


@pytest.fixture
def admin(make_account):
    return make_account(Role.ADMIN)


@pytest.fixture
def user_api(attendee) -> APIClient:
    return authorized(attendee)


@pytest.fixture
def organizer_api(organizer) -> APIClient:
    return authorized(organizer)


@pytest.fixture
def admin_api(admin) -> APIClient:
    return authorized(admin)


@pytest.fixture
def make_event(db):
    def make(
        organizer,
        title: str = "Jazz Night",
        status: str = Event.Status.PUBLISHED,
        category: str = "MUSICAL_CONCERT",
        starts_in: timedelta = timedelta(days=3),
        tickets: list[tuple[str, str, int]] | None = None,
        **fields,
    ) -> Event:
        if tickets is None:
            tickets = [("General", "20.00", 100)]
        event = Event.objects.create(
            organizer_id=organizer.id.value,
            title=title,
            category=category,
            start_date=fields.pop("start_date", timezone.now() + starts_in),
            start_time=fields.pop("start_time", "19:00"),
            end_time=fields.pop("end_time", "22:00"),
            location=fields.pop("location", "Blue Hall"),
            description=fields.pop("description", "An evening of live jazz."),
            banner_image=fields.pop("banner_image", "https://img.example.com/banner.png"),
            event_type=fields.pop("event_type", Event.EventType.TICKETED if tickets else Event.EventType.FREE),
            status=status,
            **fields,
        )
        for name, price, quantity in tickets:
            TicketType.objects.create(event=event, name=name, price=Decimal(price), quantity=quantity)
        return event

    return make
