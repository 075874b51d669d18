"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models

from events.domain.value_objects import EventCategory


class Event(models.Model):
    """Persistence model for events."""

    class ScheduleType(models.TextChoices):
        SINGLE = "single"
        RECURRING = "recurring"

    class EventType(models.TextChoices):
        TICKETED = "ticketed"
        FREE = "free"

    class Status(models.TextChoices):
        DRAFT = "draft"
        PUBLISHED = "published"
        CANCELLED = "cancelled"

    CATEGORY_CHOICES = [(c.value, c.label) for c in EventCategory]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organizer = models.ForeignKey(
        "accounts.Account", on_delete=models.CASCADE, related_name="events"
    )
    title = models.CharField(max_length=255)
    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES)
    schedule_type = models.CharField(
        max_length=16, choices=ScheduleType.choices, default=ScheduleType.SINGLE
    )
    start_date = models.DateTimeField()
    start_time = models.CharField(max_length=16)
    end_time = models.CharField(max_length=16, blank=True)
    location = models.CharField(max_length=255)
    description = models.TextField()
    banner_image = models.CharField(max_length=500, blank=True)
    event_type = models.CharField(
        max_length=16, choices=EventType.choices, default=EventType.FREE
    )
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.DRAFT)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"]),
            models.Index(fields=["status", "start_date"]),
        ]

    def __str__(self) -> str:
        return self.title


class TicketType(models.Model):
    """Persistence model for ticket types."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="ticket_types"
    )
    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["event"]),
        ]
        constraints = [
            models.UniqueConstraint(fields=["event", "name"], name="unique_ticket_name_per_event"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"
