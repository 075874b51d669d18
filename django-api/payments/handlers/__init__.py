from payments.handlers.views import (
    BookingPaymentConfirmView,
    BookingPaymentIntentView,
    BookingPaymentStatusView,
    IntentConfirmView,
    IntentCreateView,
    IntentStatusView,
    RefundCreateView,
    WebhookView,
)

__all__ = [
    "BookingPaymentConfirmView",
    "BookingPaymentIntentView",
    "BookingPaymentStatusView",
    "IntentConfirmView",
    "IntentCreateView",
    "IntentStatusView",
    "RefundCreateView",
    "WebhookView",
]
