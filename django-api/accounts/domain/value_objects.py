"""Domain primitives for accounts."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class AccountId:
    """Unique identifier for an Account."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


class Role(Enum):
    """Closed set of account roles carried in bearer tokens."""

    USER = "user"
    ORGANIZER = "organizer"
    ADMIN = "admin"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class AccountStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BLOCKED = "blocked"
