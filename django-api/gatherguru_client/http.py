"""HTTP client wrapper for the GatherGuru API.

Attaches the bearer token to every request and ends the session when the
server rejects it. Failures surface as ``ApiError`` subclasses; nothing is
retried.
"""

import logging
import os
from typing import Any

import httpx

from gatherguru_client.auth import SessionContext
from gatherguru_client.guards import Navigator, is_login_path

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 10.0
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."
BLOCKING_STATUSES = frozenset({"inactive", "blocked"})
PAYMENT_PREFIXES = ("/api/payments/", "/api/stripe/")


class ApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None, payload: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload or {}


class NetworkError(ApiError):
    def __init__(self) -> None:
        super().__init__(NETWORK_ERROR_MESSAGE)


class AuthenticationError(ApiError):
    pass


class AccountStatusError(ApiError):
    @property
    def status(self) -> str:
        return self.payload.get("status", "")


class RequestError(ApiError):
    pass


class PaymentError(ApiError):
    pass


class ServerError(ApiError):
    pass


def bearer(token: str) -> str:
    return token if token.startswith("Bearer ") else f"Bearer {token}"


def _payload(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {"data": data}


class ApiClient:
    def __init__(
        self,
        session: SessionContext,
        base_url: str = DEFAULT_BASE_URL,
        navigator: Navigator | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.session = session
        self.navigator = navigator or Navigator()
        # Passing the jar itself (not a Cookies copy) shares it, so logging
        # out also drops cookies the server set on login.
        self._http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            cookies=session.cookies.jar,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            event_hooks={"request": [self._authorize], "response": [self._check_session]},
        )

    @classmethod
    def from_env(cls, session: SessionContext, **kwargs: Any) -> "ApiClient":
        return cls(
            session,
            base_url=os.getenv("GATHERGURU_API_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("GATHERGURU_API_TIMEOUT", DEFAULT_TIMEOUT)),
            **kwargs,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _authorize(self, request: httpx.Request) -> None:
        token = self.session.token
        if token:
            request.headers["Authorization"] = bearer(token)

    def _check_session(self, response: httpx.Response) -> None:
        if response.status_code != 401:
            return
        self.session.logout_if_authenticated()
        self.navigator.navigate_unless(is_login_path, "/login")

    def _end_blocked_session(self) -> None:
        if self.session.logout_if_authenticated():
            self.navigator.navigate("/login")

    def request(self, method: str, path: str, **kwargs: Any) -> dict:
        """Send a request and return the decoded envelope.

        Raises:
            NetworkError: If the server could not be reached.
            ApiError: A subclass matching the failure for non-2xx responses.
        """
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError() from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        payload = _payload(response)
        if response.is_success:
            return payload

        status_code = response.status_code
        message = payload.get("message") or response.reason_phrase
        if status_code == 401:
            raise AuthenticationError(message, status_code, payload)
        if status_code == 403 and payload.get("status") in BLOCKING_STATUSES:
            self._end_blocked_session()
            raise AccountStatusError(message, status_code, payload)
        if path.startswith(PAYMENT_PREFIXES):
            raise PaymentError(message, status_code, payload)
        if status_code >= 500:
            raise ServerError(message, status_code, payload)
        raise RequestError(message, status_code, payload)

    def get(self, path: str, **kwargs: Any) -> dict:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> dict:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> dict:
        return self.request("PUT", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> dict:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> dict:
        return self.request("DELETE", path, **kwargs)
