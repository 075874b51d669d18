"""Domain models for accounts.

Passwords never leave the store: these objects carry no credential data.
"""

from dataclasses import dataclass
from datetime import datetime

from accounts.domain.value_objects import AccountId, AccountStatus, Role


@dataclass(frozen=True)
class Account:
    """An attendee, organizer or admin."""

    id: AccountId
    role: Role
    name: str
    email: str
    phone: str
    organization: str
    is_verified: bool
    status: AccountStatus
    profile_photo: str
    created_at: datetime

    @property
    def is_active(self) -> bool:
        return self.status is AccountStatus.ACTIVE


@dataclass(frozen=True)
class NewAccount:
    """Registration data for an account that does not exist yet."""

    role: Role
    email: str
    password: str
    name: str = ""
    phone: str = ""
    organization: str = ""
