"""Domain models for attendee profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

# Fields an attendee may set on their profile.
PROFILE_FIELDS = (
    "first_name",
    "last_name",
    "website",
    "company",
    "phone_number",
    "address",
    "city",
    "country",
    "pincode",
)


@dataclass(frozen=True)
class UserProfile:
    account_id: UUID
    first_name: str
    last_name: str
    website: str
    company: str
    phone_number: str
    address: str
    city: str
    country: str
    pincode: str
    profile_image: str
    interested_event_ids: tuple[UUID, ...]
    updated_at: datetime
