"""Payment provider interface.

Gateways wrap a provider SDK and translate its objects and errors into
payments domain types.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from payments.domain import PaymentIntent, Refund, WebhookEvent


class PaymentGateway(ABC):
    @property
    @abstractmethod
    def is_configured(self) -> bool:
        ...

    @abstractmethod
    def create_intent(self, amount_cents: int, currency: str, metadata: Mapping[str, str]) -> PaymentIntent:
        ...

    @abstractmethod
    def retrieve_intent(self, payment_intent_id: str) -> PaymentIntent:
        ...

    @abstractmethod
    def refund(self, payment_intent_id: str, amount_cents: int | None, reason: str) -> Refund:
        """Refund an intent, fully when ``amount_cents`` is None."""
        ...

    @abstractmethod
    def parse_webhook(self, payload: bytes, signature: str) -> WebhookEvent:
        """Verify the signature and return the event.

        Raises:
            InvalidWebhookError: If the payload or signature is invalid.
            PaymentNotConfiguredError: If no webhook secret is set.
        """
        ...
