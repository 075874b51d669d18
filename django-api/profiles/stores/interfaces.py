"""Store interfaces (repository pattern)."""

from abc import ABC, abstractmethod
from uuid import UUID

from profiles.domain import UserProfile


class ProfileStore(ABC):
    """Interface for attendee profile persistence."""

    @abstractmethod
    def get(self, account_id: UUID) -> UserProfile | None:
        ...

    @abstractmethod
    def upsert(self, account_id: UUID, **fields: str) -> UserProfile:
        """Create the profile if missing, then set the given fields."""
        ...

    @abstractmethod
    def toggle_interest(self, account_id: UUID, event_id: UUID) -> bool:
        """Flip interest in an event; return True if now interested."""
        ...
