"""Django ORM models (persistence layer) for bookings."""

import uuid

from django.db import models


class Booking(models.Model):
    """Persistence model for ticket bookings."""

    class Status(models.TextChoices):
        PENDING = "pending"
        CONFIRMED = "confirmed"
        CANCELLED = "cancelled"
        FAILED = "failed"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        "accounts.Account", on_delete=models.CASCADE, related_name="bookings"
    )
    event = models.ForeignKey(
        "events.Event", on_delete=models.CASCADE, related_name="bookings"
    )
    # Ticket types are replaced wholesale while an event is a draft, so the
    # booking keeps the name rather than a foreign key.
    ticket_type = models.CharField(max_length=100)
    quantity = models.PositiveIntegerField()
    total_amount = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    ticket_numbers = models.JSONField(default=list)
    payment_intent_id = models.CharField(max_length=255, blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)
    booked_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-booked_at"]
        indexes = [
            models.Index(fields=["user", "-booked_at"]),
            models.Index(fields=["status", "paid_at"]),
        ]

    def __str__(self) -> str:
        return f"{self.ticket_type} x{self.quantity} ({self.status})"
