"""Serializers for transforming domain models to API responses and parsing event input."""

from rest_framework import serializers

from events.domain import (
    Capacity,
    EventCategory,
    EventDetails,
    EventType,
    Money,
    ScheduleType,
    TicketTypeDraft,
)

CATEGORY_CHOICES = [c.value for c in EventCategory]
SCHEDULE_CHOICES = [s.value for s in ScheduleType]
EVENT_TYPE_CHOICES = [t.value for t in EventType]


class CategorySerializer(serializers.Serializer):
    value = serializers.CharField()
    label = serializers.CharField()


class OrganizerSummarySerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    organization = serializers.CharField()


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    price = serializers.DecimalField(
        source="price.amount", max_digits=10, decimal_places=2, coerce_to_string=False
    )
    quantity = serializers.IntegerField(source="quantity.value")


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    organizer = OrganizerSummarySerializer()
    category = serializers.CharField(source="category.value")
    categoryLabel = serializers.CharField(source="category.label")
    scheduleType = serializers.CharField(source="schedule_type.value")
    startDate = serializers.DateTimeField(source="start_date")
    startTime = serializers.CharField(source="start_time")
    endTime = serializers.CharField(source="end_time")
    location = serializers.CharField()
    description = serializers.CharField()
    bannerImage = serializers.CharField(source="banner_image")
    eventType = serializers.CharField(source="event_type.value")
    status = serializers.CharField(source="status.value")
    ticketing = TicketTypeSerializer(source="ticket_types", many=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class TicketTypeInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    quantity = serializers.IntegerField(min_value=0)


def ticket_drafts(items: list[dict]) -> list[TicketTypeDraft]:
    return [
        TicketTypeDraft(
            name=item["name"],
            price=Money(item["price"]),
            quantity=Capacity(item["quantity"]),
        )
        for item in items
    ]


def validate_unique_names(items: list[dict]) -> list[dict]:
    names = [item["name"] for item in items]
    if len(names) != len(set(names)):
        raise serializers.ValidationError("Ticket type names must be unique")
    return items


class EventDetailsSerializer(serializers.Serializer):
    """Step 1 input: basic event details."""

    title = serializers.CharField(max_length=255)
    category = serializers.ChoiceField(choices=CATEGORY_CHOICES)
    scheduleType = serializers.ChoiceField(
        source="schedule_type", choices=SCHEDULE_CHOICES, default=ScheduleType.SINGLE.value
    )
    startDate = serializers.DateTimeField(source="start_date")
    startTime = serializers.CharField(source="start_time", max_length=16)
    endTime = serializers.CharField(source="end_time", max_length=16, required=False, allow_blank=True, default="")
    location = serializers.CharField(max_length=255)
    description = serializers.CharField()

    def to_details(self) -> EventDetails:
        data = self.validated_data
        return EventDetails(
            title=data["title"],
            category=EventCategory(data["category"]),
            schedule_type=ScheduleType(data["schedule_type"]),
            start_date=data["start_date"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            location=data["location"],
            description=data["description"],
        )


class BannerSerializer(serializers.Serializer):
    bannerImage = serializers.CharField(
        source="banner_image",
        error_messages={
            "required": "Please provide a banner image",
            "blank": "Please provide a banner image",
        },
    )


class TicketingSerializer(serializers.Serializer):
    """Step 3 input: event type and the full list of ticket types."""

    eventType = serializers.ChoiceField(source="event_type", choices=EVENT_TYPE_CHOICES)
    ticketing = TicketTypeInputSerializer(many=True, allow_empty=True, default=list)

    def validate_ticketing(self, value: list[dict]) -> list[dict]:
        return validate_unique_names(value)


class EventEditSerializer(serializers.Serializer):
    """Partial edit. Blank values mean "keep the current value"."""

    title = serializers.CharField(max_length=255, required=False, allow_blank=True)
    category = serializers.ChoiceField(choices=CATEGORY_CHOICES, required=False, allow_blank=True)
    scheduleType = serializers.ChoiceField(source="schedule_type", choices=SCHEDULE_CHOICES, required=False, allow_blank=True)
    startDate = serializers.DateTimeField(source="start_date", required=False, allow_null=True)
    startTime = serializers.CharField(source="start_time", max_length=16, required=False, allow_blank=True)
    endTime = serializers.CharField(source="end_time", max_length=16, required=False, allow_blank=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    eventType = serializers.ChoiceField(source="event_type", choices=EVENT_TYPE_CHOICES, required=False, allow_blank=True)
    ticketing = TicketTypeInputSerializer(source="ticket_types", many=True, required=False)

    def validate_ticketing(self, value: list[dict]) -> list[dict]:
        return validate_unique_names(value)

    def to_changes(self) -> dict:
        changes = {
            key: value for key, value in self.validated_data.items() if value not in (None, "")
        }
        if "category" in changes:
            changes["category"] = EventCategory(changes["category"])
        if "schedule_type" in changes:
            changes["schedule_type"] = ScheduleType(changes["schedule_type"])
        if "event_type" in changes:
            changes["event_type"] = EventType(changes["event_type"])
        if "ticket_types" in changes:
            changes["ticket_types"] = ticket_drafts(changes["ticket_types"])
        return changes
