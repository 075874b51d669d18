"""Stripe implementation of the PaymentGateway."""

import logging
from collections.abc import Callable, Mapping
from typing import TypeVar

import stripe
from django.conf import settings

from payments.domain import PaymentIntent, Refund, WebhookEvent
from payments.domain.errors import (
    CardError,
    InvalidPaymentRequestError,
    InvalidWebhookError,
    PaymentNotConfiguredError,
    PaymentProviderError,
)
from payments.gateways.interfaces import PaymentGateway

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _intent(obj) -> PaymentIntent:
    return PaymentIntent(
        id=obj["id"],
        status=obj["status"],
        amount_cents=obj["amount"],
        currency=obj["currency"],
        client_secret=obj.get("client_secret") or "",
        metadata=dict(obj.get("metadata") or {}),
    )


class StripePaymentGateway(PaymentGateway):
    """Calls Stripe with an explicit API key per request."""

    def __init__(self, secret_key: str | None = None, webhook_secret: str | None = None) -> None:
        self._secret_key = (settings.STRIPE_SECRET_KEY if secret_key is None else secret_key).strip()
        self._webhook_secret = (
            settings.STRIPE_WEBHOOK_SECRET if webhook_secret is None else webhook_secret
        ).strip()

    @property
    def is_configured(self) -> bool:
        return self._secret_key.startswith("sk_")

    def _call(self, operation: str, fn: Callable[[], T]) -> T:
        if not self.is_configured:
            raise PaymentNotConfiguredError()
        try:
            return fn()
        except stripe.CardError as exc:
            raise CardError(exc.user_message or str(exc))
        except stripe.InvalidRequestError as exc:
            raise InvalidPaymentRequestError(exc.user_message or str(exc))
        except stripe.StripeError:
            logger.exception("Stripe %s failed", operation)
            raise PaymentProviderError()

    def create_intent(self, amount_cents: int, currency: str, metadata: Mapping[str, str]) -> PaymentIntent:
        created = self._call(
            "create_intent",
            lambda: stripe.PaymentIntent.create(
                api_key=self._secret_key,
                amount=amount_cents,
                currency=currency,
                metadata=dict(metadata),
                automatic_payment_methods={"enabled": True},
            ),
        )
        logger.info("Created payment intent %s for %d %s", created["id"], amount_cents, currency)
        return _intent(created)

    def retrieve_intent(self, payment_intent_id: str) -> PaymentIntent:
        return _intent(
            self._call(
                "retrieve_intent",
                lambda: stripe.PaymentIntent.retrieve(payment_intent_id, api_key=self._secret_key),
            )
        )

    def refund(self, payment_intent_id: str, amount_cents: int | None, reason: str) -> Refund:
        params: dict = {"payment_intent": payment_intent_id, "reason": reason}
        if amount_cents is not None:
            params["amount"] = amount_cents
        refund = self._call(
            "refund",
            lambda: stripe.Refund.create(api_key=self._secret_key, **params),
        )
        logger.info("Refund %s created for %s", refund["id"], payment_intent_id)
        return Refund(
            id=refund["id"],
            status=refund["status"],
            amount_cents=refund["amount"],
            payment_intent_id=payment_intent_id,
        )

    def parse_webhook(self, payload: bytes, signature: str) -> WebhookEvent:
        if not self._webhook_secret:
            raise PaymentNotConfiguredError("Webhook secret not configured")
        if not signature:
            raise InvalidWebhookError("No Stripe signature found")
        try:
            event = stripe.Webhook.construct_event(payload, signature, self._webhook_secret)
        except ValueError:
            raise InvalidWebhookError("Invalid payload")
        except stripe.SignatureVerificationError as exc:
            logger.warning("Rejected webhook with bad signature")
            raise InvalidWebhookError(str(exc))
        return WebhookEvent(type=event["type"], payload=dict(event["data"]["object"]))
