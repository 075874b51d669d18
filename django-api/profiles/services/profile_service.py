"""Profile service - attendee profile details, photo and interests."""

import logging
from collections.abc import Mapping
from uuid import UUID

from common.images import ImageStore
from events.domain import Event
from events.domain.errors import EventNotFoundError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventQuery, EventStore
from profiles.domain import PROFILE_FIELDS, UserProfile
from profiles.domain.errors import ProfileImageNotFoundError, ProfileNotFoundError
from profiles.stores.interfaces import ProfileStore

logger = logging.getLogger(__name__)

IMAGE_FOLDER = "profile-images"


class ProfileService:
    def __init__(
        self,
        store: ProfileStore,
        image_store: ImageStore | None = None,
        event_store: EventStore | None = None,
    ) -> None:
        self._store = store
        self._images = image_store
        self._events = event_store

    def find_profile(self, account_id: UUID) -> UserProfile | None:
        return self._store.get(account_id)

    def get_profile(self, account_id: UUID) -> UserProfile:
        profile = self._store.get(account_id)
        if profile is None:
            raise ProfileNotFoundError()
        return profile

    def update_profile(self, account_id: UUID, changes: Mapping[str, str]) -> UserProfile:
        """Create or update the profile with the known fields in ``changes``."""
        fields = {key: value.strip() for key, value in changes.items() if key in PROFILE_FIELDS}
        return self._store.upsert(account_id, **fields)

    def upload_image(self, account_id: UUID, image: str) -> UserProfile:
        """Store a new profile image, dropping the previous one."""
        if self._images is None:
            raise RuntimeError("ProfileService was built without an image store")
        current = self._store.get(account_id)
        url = self._images.save(image, IMAGE_FOLDER)
        if current and current.profile_image and current.profile_image != url:
            self._images.delete(current.profile_image)
        return self._store.upsert(account_id, profile_image=url)

    def delete_image(self, account_id: UUID) -> UserProfile:
        if self._images is None:
            raise RuntimeError("ProfileService was built without an image store")
        current = self._store.get(account_id)
        if current is None or not current.profile_image:
            raise ProfileImageNotFoundError()
        self._images.delete(current.profile_image)
        return self._store.upsert(account_id, profile_image="")

    def toggle_interest(self, account_id: UUID, event_id: str) -> bool:
        """Flip interest in a published event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        if self._events is None or not self._events.event_exists(parsed):
            raise EventNotFoundError()
        interested = self._store.toggle_interest(account_id, parsed.value)
        logger.info("Account %s %s event %s", account_id, "marked" if interested else "unmarked", parsed)
        return interested

    def interested_events(self, account_id: UUID) -> list[Event]:
        profile = self._store.get(account_id)
        if profile is None or not profile.interested_event_ids or self._events is None:
            return []
        return self._events.list_events(EventQuery(ids=frozenset(profile.interested_event_ids)))
