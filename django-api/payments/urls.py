from django.urls import path

from payments.handlers import (
    BookingPaymentConfirmView,
    BookingPaymentIntentView,
    BookingPaymentStatusView,
    IntentConfirmView,
    IntentCreateView,
    IntentStatusView,
    RefundCreateView,
    WebhookView,
)

# /api/payments/
payments_urlpatterns = [
    path("create-payment-intent", BookingPaymentIntentView.as_view(), name="payment-intent"),
    path("confirm-payment", BookingPaymentConfirmView.as_view(), name="payment-confirm"),
    path(
        "payment-status/<str:payment_intent_id>",
        BookingPaymentStatusView.as_view(),
        name="payment-status",
    ),
    path("webhook", WebhookView.as_view(), name="payment-webhook"),
]

# /api/stripe/
stripe_urlpatterns = [
    path("create-payment-intent", IntentCreateView.as_view(), name="stripe-intent"),
    path("confirm-payment", IntentConfirmView.as_view(), name="stripe-confirm"),
    path("payment-status/<str:payment_intent_id>", IntentStatusView.as_view(), name="stripe-status"),
    path("create-refund", RefundCreateView.as_view(), name="stripe-refund"),
]
