"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import calendar
import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta
from decimal import Decimal
from uuid import UUID

from django.utils import timezone

from common.images import ImageStore
from events.domain import (
    Event,
    EventCategory,
    EventDetails,
    EventId,
    EventStatus,
    EventType,
    TicketTypeDraft,
)
from events.domain.errors import (
    BannerRequiredError,
    EventIncompleteError,
    EventLockedError,
    EventNotFoundError,
    EventNotOwnedError,
    InvalidCategoryError,
    InvalidEventIdError,
    InvalidFilterError,
)
from events.stores.interfaces import EventQuery, EventStore, PriceBand

logger = logging.getLogger(__name__)

POPULAR_LIMIT = 6
CATEGORY_LIMIT = 6
SEARCH_LIMIT = 10
UPCOMING_LIMIT = 5

BANNER_FOLDER = "event-banners"

# Fields a published event still accepts.
PUBLISHED_EDITABLE = frozenset({"title", "description", "location"})
DETAIL_FIELDS = (
    "title",
    "category",
    "schedule_type",
    "start_date",
    "start_time",
    "end_time",
    "location",
    "description",
)

PRICE_RANGES = {
    "under25": PriceBand(upper=Decimal("25"), upper_inclusive=False),
    "25-50": PriceBand(lower=Decimal("25"), upper=Decimal("50")),
    "above50": PriceBand(lower=Decimal("50"), lower_inclusive=False),
}


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidEventIdError()


def parse_category(category: str) -> EventCategory:
    try:
        return EventCategory(category)
    except ValueError:
        raise InvalidCategoryError(category)


def start_of_day(moment: datetime) -> datetime:
    return timezone.localtime(moment).replace(hour=0, minute=0, second=0, microsecond=0)


def add_month(moment: datetime) -> datetime:
    year, month = (moment.year + 1, 1) if moment.month == 12 else (moment.year, moment.month + 1)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def date_window(date_range: str, now: datetime) -> tuple[datetime, datetime]:
    """Return the [start, end) window for a named date range."""
    today = start_of_day(now)
    if date_range == "today":
        return today, today + timedelta(days=1)
    if date_range == "tomorrow":
        return today + timedelta(days=1), today + timedelta(days=2)
    if date_range == "weekend":
        # Sunday counts as the start of a week, so on Sundays this is next weekend.
        days_to_friday = 5 - (today.weekday() + 1) % 7
        friday = today + timedelta(days=days_to_friday)
        return friday, friday + timedelta(days=3)
    if date_range == "week":
        return today, today + timedelta(days=7)
    if date_range == "month":
        return today, add_month(today)
    raise InvalidFilterError("date range", date_range)


class EventService:
    """Service for event catalog and organizer event management."""

    def __init__(
        self,
        store: EventStore,
        image_store: ImageStore | None = None,
        now: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._images = image_store
        self._now = now

    # Public catalog

    def categories(self) -> list[EventCategory]:
        return list(EventCategory)

    def popular(self) -> list[Event]:
        """Newest published events."""
        return self._store.list_events(
            EventQuery(status=EventStatus.PUBLISHED, order_by="-created_at", limit=POPULAR_LIMIT)
        )

    def by_category(self, category: str) -> list[Event]:
        """Published events in a category that have not started yet.

        Raises:
            InvalidCategoryError: If the category is unknown.
        """
        return self._store.list_events(
            EventQuery(
                status=EventStatus.PUBLISHED,
                category=parse_category(category),
                starts_from=self._now(),
                limit=CATEGORY_LIMIT,
            )
        )

    def search(self, text: str) -> list[Event]:
        text = (text or "").strip()
        if not text:
            return []
        return self._store.list_events(
            EventQuery(
                status=EventStatus.PUBLISHED,
                starts_from=self._now(),
                text=text,
                limit=SEARCH_LIMIT,
            )
        )

    def list_published(
        self,
        category: str | None = None,
        price_range: str | None = None,
        date_range: str | None = None,
    ) -> list[Event]:
        """Published events, soonest first, filtered by the explore page filters.

        Raises:
            InvalidCategoryError: If the category is unknown.
            InvalidFilterError: If a price or date range is unknown.
        """
        filters: dict = {"status": EventStatus.PUBLISHED}
        if category:
            filters["category"] = parse_category(category)

        if price_range == "free":
            filters["event_type"] = EventType.FREE
        elif price_range:
            if price_range not in PRICE_RANGES:
                raise InvalidFilterError("price range", price_range)
            filters["event_type"] = EventType.TICKETED
            filters["price_band"] = PRICE_RANGES[price_range]

        if date_range:
            filters["starts_from"], filters["starts_before"] = date_window(date_range, self._now())

        return self._store.list_events(EventQuery(**filters))

    def upcoming(self) -> list[Event]:
        return self._store.list_events(
            EventQuery(
                status=EventStatus.PUBLISHED,
                starts_from=start_of_day(self._now()),
                limit=UPCOMING_LIMIT,
            )
        )

    # Admin views, every status

    def admin_upcoming(self) -> list[Event]:
        return self._store.list_events(EventQuery(starts_from=start_of_day(self._now())))

    def admin_past(self) -> list[Event]:
        return self._store.list_events(
            EventQuery(starts_before=start_of_day(self._now()), order_by="-start_date")
        )

    def get_event(
        self,
        event_id: str,
        viewer_id: UUID | None = None,
        is_admin: bool = False,
    ) -> Event:
        """Return an event by ID.

        Drafts are only visible to their organizer and to admins.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist or is hidden.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError()
        if not event.is_published and not is_admin and event.organizer.id != viewer_id:
            raise EventNotFoundError()
        return event

    # Organizer workflow

    def create_event(self, organizer_id: UUID, details: EventDetails) -> Event:
        """Step 1: persist the basic details as a draft."""
        event = self._store.create_event(organizer_id, details)
        logger.info("Organizer %s created draft event %s", organizer_id, event.id)
        return event

    def update_banner(self, event_id: str, organizer_id: UUID, image: str) -> Event:
        """Step 2: store the banner image, replacing any previous one."""
        if not image:
            raise BannerRequiredError()
        if self._images is None:
            raise RuntimeError("EventService was built without an image store")
        event = self.get_owned_event(event_id, organizer_id)
        url = self._images.save(image, BANNER_FOLDER)
        if event.banner_image and event.banner_image != url:
            self._images.delete(event.banner_image)
        return self._store.update_event(event.id, banner_image=url)

    def update_ticketing(
        self,
        event_id: str,
        organizer_id: UUID,
        event_type: EventType,
        ticket_types: list[TicketTypeDraft],
    ) -> Event:
        """Step 3: replace the ticket types and set the event type."""
        event = self.get_owned_event(event_id, organizer_id)
        if event.is_published:
            raise EventLockedError()
        self._store.update_event(event.id, event_type=event_type)
        return self._store.replace_ticket_types(event.id, ticket_types)

    def publish(self, event_id: str, organizer_id: UUID) -> Event:
        """Step 4: make a complete event visible in the catalog.

        Raises:
            EventIncompleteError: If the title or banner is missing, or a
                ticketed event has no ticket types.
        """
        event = self.get_owned_event(event_id, organizer_id)
        if not event.title or not event.banner_image:
            raise EventIncompleteError()
        if event.event_type is EventType.TICKETED and not event.ticket_types:
            raise EventIncompleteError()
        published = self._store.update_event(event.id, status=EventStatus.PUBLISHED)
        logger.info("Published event %s", event.id)
        return published

    def organizer_events(self, organizer_id: UUID) -> list[Event]:
        return self._store.list_events(
            EventQuery(organizer_id=organizer_id, order_by="-created_at")
        )

    def get_owned_event(self, event_id: str, organizer_id: UUID) -> Event:
        """Return the organizer's own event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotOwnedError: If the event is missing or belongs to someone else.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None or event.organizer.id != organizer_id:
            raise EventNotOwnedError()
        return event

    def edit_event(self, event_id: str, organizer_id: UUID, changes: Mapping[str, object]) -> Event:
        """Apply non-empty changes.

        Published events accept only title, description and location;
        ticketing (``event_type``, ``ticket_types``) changes only while draft.

        Raises:
            EventLockedError: If a published event gets any other field.
        """
        event = self.get_owned_event(event_id, organizer_id)
        provided = {key: value for key, value in changes.items() if value not in (None, "")}

        if event.status is not EventStatus.DRAFT and set(provided) - PUBLISHED_EDITABLE:
            raise EventLockedError()

        fields = {key: provided[key] for key in DETAIL_FIELDS if key in provided}
        if "event_type" in provided:
            fields["event_type"] = provided["event_type"]
        if fields:
            event = self._store.update_event(event.id, **fields)
        if "ticket_types" in provided:
            event = self._store.replace_ticket_types(event.id, list(provided["ticket_types"]))
        return event

    def count_events(self) -> int:
        return self._store.count_events()
