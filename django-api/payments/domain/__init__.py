from payments.domain.models import PaymentIntent, Refund, WebhookEvent

__all__ = ["PaymentIntent", "Refund", "WebhookEvent"]
