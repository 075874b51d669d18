"""Django ORM models (persistence layer) for accounts."""

import uuid

from django.db import models


class Account(models.Model):
    """Persistence model for attendees, organizers and admins."""

    class Role(models.TextChoices):
        USER = "user"
        ORGANIZER = "organizer"
        ADMIN = "admin"

    class Status(models.TextChoices):
        ACTIVE = "active"
        INACTIVE = "inactive"
        BLOCKED = "blocked"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    role = models.CharField(max_length=16, choices=Role.choices)
    name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(max_length=255)
    password = models.CharField(max_length=128)
    phone = models.CharField(max_length=32, blank=True)
    organization = models.CharField(max_length=255, blank=True)
    is_verified = models.BooleanField(default=False)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.ACTIVE)
    profile_photo = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["email", "role"], name="unique_email_per_role"),
        ]

    def __str__(self) -> str:
        return f"{self.email} ({self.role})"
