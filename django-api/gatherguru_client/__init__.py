"""Client-side session layer for the GatherGuru API."""

from gatherguru_client.auth import AuthState, SessionContext, UserInfo
from gatherguru_client.http import (
    AccountStatusError,
    ApiClient,
    ApiError,
    AuthenticationError,
    NetworkError,
    PaymentError,
    RequestError,
    ServerError,
)
from gatherguru_client.roles import Role

__all__ = [
    "AccountStatusError",
    "ApiClient",
    "ApiError",
    "AuthState",
    "AuthenticationError",
    "NetworkError",
    "PaymentError",
    "RequestError",
    "Role",
    "ServerError",
    "SessionContext",
    "UserInfo",
]
