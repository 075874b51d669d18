"""Base class for domain errors raised by services."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message.

    Subclasses set ``http_status`` so handlers can map them without
    knowing every concrete error.
    """

    code: Enum
    message: str
    context: Mapping[str, Any] | None = None

    http_status: ClassVar[int] = 400

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
