"""Django ORM implementation of the ProfileStore."""

from uuid import UUID

from django.db import transaction

from profiles import models
from profiles.domain import PROFILE_FIELDS, UserProfile
from profiles.stores.interfaces import ProfileStore

UPDATABLE_FIELDS = frozenset(PROFILE_FIELDS) | {"profile_image"}


def to_domain(row: models.UserProfile) -> UserProfile:
    return UserProfile(
        account_id=row.account_id,
        first_name=row.first_name,
        last_name=row.last_name,
        website=row.website,
        company=row.company,
        phone_number=row.phone_number,
        address=row.address,
        city=row.city,
        country=row.country,
        pincode=row.pincode,
        profile_image=row.profile_image,
        interested_event_ids=tuple(row.interested_events.values_list("id", flat=True)),
        updated_at=row.updated_at,
    )


class DjangoProfileStore(ProfileStore):
    def get(self, account_id: UUID) -> UserProfile | None:
        row = models.UserProfile.objects.filter(account_id=account_id).first()
        return to_domain(row) if row else None

    def upsert(self, account_id: UUID, **fields: str) -> UserProfile:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update profile fields: {sorted(unknown)}")
        row, _ = models.UserProfile.objects.update_or_create(account_id=account_id, defaults=fields)
        return to_domain(row)

    def toggle_interest(self, account_id: UUID, event_id: UUID) -> bool:
        with transaction.atomic():
            row, _ = models.UserProfile.objects.select_for_update().get_or_create(account_id=account_id)
            if row.interested_events.filter(id=event_id).exists():
                row.interested_events.remove(event_id)
                return False
            row.interested_events.add(event_id)
            return True
