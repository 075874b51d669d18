"""Provider-neutral views of payment objects."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

SUCCEEDED = "succeeded"


@dataclass(frozen=True)
class PaymentIntent:
    id: str
    status: str
    amount_cents: int
    currency: str
    client_secret: str = ""
    metadata: Mapping[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == SUCCEEDED

    @property
    def amount(self) -> Decimal:
        return Decimal(self.amount_cents) / 100


@dataclass(frozen=True)
class Refund:
    id: str
    status: str
    amount_cents: int
    payment_intent_id: str

    @property
    def amount(self) -> Decimal:
        return Decimal(self.amount_cents) / 100


@dataclass(frozen=True)
class WebhookEvent:
    """A verified provider notification."""

    type: str
    payload: Mapping[str, Any]

    @property
    def metadata(self) -> Mapping[str, str]:
        return self.payload.get("metadata") or {}
