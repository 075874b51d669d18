"""Domain error codes for the payments module."""

from enum import Enum

from common.errors import DomainError


class ErrorCode(Enum):
    NOT_CONFIGURED = "NOT_CONFIGURED"
    CARD_ERROR = "CARD_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    PAYMENT_NOT_SUCCESSFUL = "PAYMENT_NOT_SUCCESSFUL"
    PAYMENT_MISMATCH = "PAYMENT_MISMATCH"
    BOOKING_ALREADY_PAID = "BOOKING_ALREADY_PAID"
    BOOKING_NOT_PAYABLE = "BOOKING_NOT_PAYABLE"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_WEBHOOK = "INVALID_WEBHOOK"


class PaymentNotConfiguredError(DomainError):
    """Raised when the payment provider has no usable credentials."""

    http_status = 503

    def __init__(self, message: str = "Payment service is not configured. Please contact support.") -> None:
        super().__init__(code=ErrorCode.NOT_CONFIGURED, message=message)


class CardError(DomainError):
    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.CARD_ERROR, message=f"Card error: {detail}")


class InvalidPaymentRequestError(DomainError):
    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_REQUEST, message=f"Invalid request: {detail}")


class PaymentProviderError(DomainError):
    """Raised for provider failures other than card and request errors."""

    http_status = 502

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PROVIDER_ERROR,
            message="Payment service error. Please try again later.",
        )


class PaymentNotSuccessfulError(DomainError):
    def __init__(self, status: str, message: str = "Payment not successful") -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_NOT_SUCCESSFUL,
            message=message,
            context={"status": status},
        )


class PaymentMismatchError(DomainError):
    """Raised when a payment intent was not created for the booking being confirmed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_MISMATCH,
            message="Payment does not match this booking",
        )


class BookingAlreadyPaidError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.BOOKING_ALREADY_PAID, message="Booking is already paid")


class BookingNotPayableError(DomainError):
    def __init__(self, status: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_PAYABLE,
            message=f"Booking is {status} and cannot be paid",
        )


class InvalidAmountError(DomainError):
    def __init__(self, message: str = "Invalid amount") -> None:
        super().__init__(code=ErrorCode.INVALID_AMOUNT, message=message)


class InvalidWebhookError(DomainError):
    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_WEBHOOK, message=f"Webhook Error: {detail}")
