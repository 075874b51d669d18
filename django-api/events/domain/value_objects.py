"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketTypeId:
    """Unique identifier for a TicketType."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    def __mul__(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)

    @property
    def cents(self) -> int:
        return int((self.amount * 100).quantize(Decimal("1")))


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


class EventCategory(Enum):
    MUSICAL_CONCERT = "MUSICAL_CONCERT"
    WEDDING = "WEDDING"
    CORPORATE_EVENT = "CORPORATE_EVENT"
    BIRTHDAY_PARTY = "BIRTHDAY_PARTY"
    CONFERENCE = "CONFERENCE"
    SEMINAR = "SEMINAR"
    WORKSHOP = "WORKSHOP"
    EXHIBITION = "EXHIBITION"
    SPORTS_EVENT = "SPORTS_EVENT"
    CHARITY_EVENT = "CHARITY_EVENT"
    FOOD_FESTIVAL = "FOOD_FESTIVAL"
    CULTURAL_FESTIVAL = "CULTURAL_FESTIVAL"
    THEATER_PLAY = "THEATER_PLAY"
    COMEDY_SHOW = "COMEDY_SHOW"
    NETWORKING_EVENT = "NETWORKING_EVENT"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        return " ".join(word.capitalize() for word in self.value.split("_"))


class ScheduleType(Enum):
    SINGLE = "single"
    RECURRING = "recurring"


class EventType(Enum):
    TICKETED = "ticketed"
    FREE = "free"


class EventStatus(Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"
