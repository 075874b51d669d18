"""Token persistence: local storage plus a ``token`` cookie."""

import time
from http.cookiejar import Cookie

import httpx

from gatherguru_client.storage import TOKEN_KEY, Storage

COOKIE_NAME = "token"
COOKIE_LIFETIME_SECONDS = 7 * 24 * 60 * 60


def token_cookie(token: str, domain: str = "", now: float | None = None) -> Cookie:
    """Build the 7-day, Secure, SameSite=Strict token cookie."""
    issued = time.time() if now is None else now
    return Cookie(
        version=0,
        name=COOKIE_NAME,
        value=token,
        port=None,
        port_specified=False,
        domain=domain,
        domain_specified=bool(domain),
        domain_initial_dot=False,
        path="/",
        path_specified=True,
        secure=True,
        expires=int(issued + COOKIE_LIFETIME_SECONDS),
        discard=False,
        comment=None,
        comment_url=None,
        rest={"SameSite": "Strict"},
    )


class TokenStore:
    def __init__(self, storage: Storage, cookies: httpx.Cookies | None = None, domain: str = "") -> None:
        self.storage = storage
        self.cookies = cookies if cookies is not None else httpx.Cookies()
        self._domain = domain

    def load(self) -> str | None:
        """Stored token, falling back to the cookie."""
        return self.storage.get(TOKEN_KEY) or self.cookies.get(COOKIE_NAME)

    def save(self, token: str) -> None:
        self.storage.set(TOKEN_KEY, token)
        # Replaces any server-set copy so lookups by name never conflict.
        self.cookies.delete(COOKIE_NAME)
        self.cookies.jar.set_cookie(token_cookie(token, self._domain))

    def clear(self) -> None:
        self.storage.remove(TOKEN_KEY)
        self.cookies.delete(COOKIE_NAME)
