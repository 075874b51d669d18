"""Django ORM models (persistence layer) for attendee profiles."""

from django.db import models


class UserProfile(models.Model):
    """Extended attendee details; created on first save."""

    account = models.OneToOneField(
        "accounts.Account", on_delete=models.CASCADE, related_name="profile"
    )
    first_name = models.CharField(max_length=100, blank=True)
    last_name = models.CharField(max_length=100, blank=True)
    website = models.CharField(max_length=255, blank=True)
    company = models.CharField(max_length=255, blank=True)
    phone_number = models.CharField(max_length=32, blank=True)
    address = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)
    pincode = models.CharField(max_length=20, blank=True)
    profile_image = models.CharField(max_length=500, blank=True)
    interested_events = models.ManyToManyField(
        "events.Event", related_name="interested_profiles", blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Profile of {self.account_id}"
