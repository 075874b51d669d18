"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never expose internal error details

Domain errors are mapped to HTTP responses by the project exception handler.
Public catalog reads are cached; model signals invalidate the cached keys.
"""

from django.core.cache import cache
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain import Role
from accounts.permissions import IsAdmin, IsOrganizer
from common.images import get_image_store
from common.responses import created, ok
from events.cache import CATEGORIES_KEY, POPULAR_KEY, UPCOMING_KEY, detail_key
from events.domain import EventType
from events.handlers.serializers import (
    BannerSerializer,
    CategorySerializer,
    EventDetailsSerializer,
    EventEditSerializer,
    EventSerializer,
    TicketingSerializer,
    ticket_drafts,
)
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore(), image_store=get_image_store())


def organizer_id(request: Request):
    return request.user.id.value


class EventCategoryListView(APIView):
    """Handler for GET /api/events/categories"""

    def get(self, request: Request) -> Response:
        data = cache.get(CATEGORIES_KEY)
        if data is None:
            categories = get_event_service().categories()
            data = CategorySerializer(
                [{"value": c.value, "label": c.label} for c in categories], many=True
            ).data
            cache.set(CATEGORIES_KEY, data)
        return ok(data)


class PopularEventsView(APIView):
    """Handler for GET /api/events/popular"""

    def get(self, request: Request) -> Response:
        data = cache.get(POPULAR_KEY)
        if data is None:
            data = EventSerializer(get_event_service().popular(), many=True).data
            cache.set(POPULAR_KEY, data)
        return ok(data)


class UpcomingEventsView(APIView):
    """Handler for GET /api/events/upcoming"""

    def get(self, request: Request) -> Response:
        data = cache.get(UPCOMING_KEY)
        if data is None:
            data = EventSerializer(get_event_service().upcoming(), many=True).data
            cache.set(UPCOMING_KEY, data)
        return ok(data)


class CategoryEventsView(APIView):
    """Handler for GET /api/events/category/{category}"""

    def get(self, request: Request, category: str) -> Response:
        events = get_event_service().by_category(category)
        return ok(EventSerializer(events, many=True).data)


class EventSearchView(APIView):
    """Handler for GET /api/events/search?query="""

    def get(self, request: Request) -> Response:
        events = get_event_service().search(request.query_params.get("query", ""))
        return ok(EventSerializer(events, many=True).data)


class EventListView(APIView):
    """Handler for GET /api/events/all"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        events = get_event_service().list_published(
            category=params.get("category") or None,
            price_range=params.get("priceRange") or None,
            date_range=params.get("dateRange") or None,
        )
        return ok(EventSerializer(events, many=True).data, count=len(events))


class AdminUpcomingEventsView(APIView):
    """Handler for GET /api/events/admin/upcoming"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        return ok(EventSerializer(get_event_service().admin_upcoming(), many=True).data)


class AdminPastEventsView(APIView):
    """Handler for GET /api/events/admin/past"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        return ok(EventSerializer(get_event_service().admin_past(), many=True).data)


class EventCreateView(APIView):
    """Handler for POST /api/events"""

    permission_classes = [IsOrganizer]

    def post(self, request: Request) -> Response:
        serializer = EventDetailsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(organizer_id(request), serializer.to_details())
        return created(EventSerializer(event).data)


class EventDetailView(APIView):
    """Handler for GET/PUT /api/events/{event_id}"""

    def get_permissions(self):
        if self.request.method == "PUT":
            return [IsOrganizer()]
        return super().get_permissions()

    def get(self, request: Request, event_id: str) -> Response:
        cached = cache.get(detail_key(event_id))
        if cached is not None:
            return ok(cached)

        user = request.user
        event = get_event_service().get_event(
            event_id,
            viewer_id=user.id.value if user else None,
            is_admin=bool(user and user.role is Role.ADMIN),
        )
        data = EventSerializer(event).data
        # Drafts are viewer-dependent and never cached.
        if event.is_published:
            cache.set(detail_key(event_id), data)
        return ok(data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventEditSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().edit_event(
            event_id, organizer_id(request), serializer.to_changes()
        )
        return ok(EventSerializer(event).data)


class EventBannerView(APIView):
    """Handler for PATCH /api/events/{event_id}/banner"""

    permission_classes = [IsOrganizer]

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = BannerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_banner(
            event_id, organizer_id(request), serializer.validated_data["banner_image"]
        )
        return ok({"bannerImage": event.banner_image})


class EventTicketingView(APIView):
    """Handler for PATCH /api/events/{event_id}/ticketing"""

    permission_classes = [IsOrganizer]

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = TicketingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_ticketing(
            event_id,
            organizer_id(request),
            EventType(serializer.validated_data["event_type"]),
            ticket_drafts(serializer.validated_data["ticketing"]),
        )
        return ok(EventSerializer(event).data)


class EventPublishView(APIView):
    """Handler for PATCH /api/events/{event_id}/publish"""

    permission_classes = [IsOrganizer]

    def patch(self, request: Request, event_id: str) -> Response:
        event = get_event_service().publish(event_id, organizer_id(request))
        return ok(EventSerializer(event).data)


class OrganizerEventListView(APIView):
    """Handler for GET /api/events/organizer/events"""

    permission_classes = [IsOrganizer]

    def get(self, request: Request) -> Response:
        events = get_event_service().organizer_events(organizer_id(request))
        return ok(EventSerializer(events, many=True).data)


class EventEditView(APIView):
    """Handler for GET /api/events/edit/{event_id}"""

    permission_classes = [IsOrganizer]

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_owned_event(event_id, organizer_id(request))
        return ok(EventSerializer(event).data)
