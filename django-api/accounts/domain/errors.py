"""Domain error codes for the accounts module."""

from enum import Enum

from accounts.domain.value_objects import AccountStatus, Role
from common.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    ACCOUNT_EXISTS = "ACCOUNT_EXISTS"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    ACCOUNT_NOT_ACTIVE = "ACCOUNT_NOT_ACTIVE"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"


class AccountExistsError(DomainError):
    """Raised when registering an email that is already taken for the role."""

    def __init__(self, role: Role) -> None:
        super().__init__(
            code=ErrorCode.ACCOUNT_EXISTS,
            message=f"{role.label} already exists",
        )


class AccountNotFoundError(DomainError):
    """Raised when an account is not found."""

    http_status = 404

    def __init__(self, role: Role = Role.USER) -> None:
        super().__init__(
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            message=f"{role.label} not found",
        )


class InvalidAccountIdError(DomainError):
    """Raised when an account ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Invalid ID format",
        )


class MissingCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_CREDENTIALS,
            message="Please provide email and password",
        )


class InvalidCredentialsError(DomainError):
    """Raised when an email/password pair does not match."""

    http_status = 401

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(code=ErrorCode.INVALID_CREDENTIALS, message=message)


STATUS_MESSAGES = {
    AccountStatus.BLOCKED: "Your account has been blocked. Please contact support.",
    AccountStatus.INACTIVE: "Your account is currently inactive. Please contact support to reactivate.",
}


class AccountNotActiveError(DomainError):
    """Raised when an inactive or blocked account tries to act.

    The response carries the account ``status`` so clients can explain
    why they were signed out.
    """

    http_status = 403

    def __init__(self, status: AccountStatus) -> None:
        super().__init__(
            code=ErrorCode.ACCOUNT_NOT_ACTIVE,
            message=STATUS_MESSAGES.get(status, "Your account has been deactivated."),
            context={"status": status.value},
        )


class RegistrationClosedError(DomainError):
    http_status = 403

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_CLOSED,
            message="Admin registration is disabled",
        )
