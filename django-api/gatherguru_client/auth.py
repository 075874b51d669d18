"""Auth state machine.

A ``SessionContext`` owns the current ``AuthState`` snapshot. Transitions
run under a lock; listeners receive the new snapshot after the lock is
released.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

import httpx

from gatherguru_client.decoder import SessionClaims, SessionDecoder
from gatherguru_client.roles import Role
from gatherguru_client.tokens import TokenStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserInfo:
    id: str
    name: str = ""
    email: str = ""
    profile_image: str | None = None

    @classmethod
    def from_claims(cls, claims: SessionClaims) -> "UserInfo":
        return cls(id=claims.id, name=claims.name, email=claims.email)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "UserInfo":
        """Build from an API account payload (camelCase keys)."""
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            email=data.get("email") or "",
            profile_image=data.get("profileImage") or data.get("profilePhoto") or None,
        )


@dataclass(frozen=True)
class AuthState:
    token: str | None = None
    role: Role | None = None
    is_authenticated: bool = False
    user: UserInfo | None = None
    loading: bool = False
    error: str | None = None


ANONYMOUS = AuthState()

Listener = Callable[[AuthState], None]


class SessionContext:
    def __init__(self, tokens: TokenStore, decoder: SessionDecoder | None = None) -> None:
        self._tokens = tokens
        self._decoder = decoder or SessionDecoder(tokens)
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self._state = ANONYMOUS
        self.hydrate()

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def token(self) -> str | None:
        return self._state.token

    @property
    def cookies(self) -> httpx.Cookies:
        """Cookie jar holding the ``token`` cookie; share it with the HTTP client."""
        return self._tokens.cookies

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: AuthState) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(state)

    def _apply(self, update: Callable[[AuthState], AuthState]) -> AuthState:
        with self._lock:
            self._state = update(self._state)
            state = self._state
        self._notify(state)
        return state

    def hydrate(self) -> AuthState:
        """Recompute state from the persisted token."""
        token = self._tokens.load()
        claims = self._decoder.decode(token)
        if claims is None:
            return self._apply(lambda _: ANONYMOUS)
        return self._apply(
            lambda _: AuthState(
                token=token,
                role=claims.role,
                is_authenticated=True,
                user=UserInfo.from_claims(claims),
            )
        )

    def login(self, token: str, role: Role, user: UserInfo) -> AuthState:
        with self._lock:
            self._tokens.save(token)
            self._state = replace(
                self._state, token=token, role=role, is_authenticated=True, user=user, error=None
            )
            state = self._state
        self._notify(state)
        logger.info("Logged in %s as %s", user.id, role.value)
        return state

    def _clear(self) -> None:
        self._tokens.clear()
        self._state = ANONYMOUS

    def logout(self) -> AuthState:
        """Always ends anonymous with empty token storage."""
        with self._lock:
            self._clear()
        self._notify(ANONYMOUS)
        return ANONYMOUS

    def logout_if_authenticated(self) -> bool:
        """Log out only if a session is active; True when this call did it.

        Concurrent callers race on the lock, so exactly one of them sees
        the authenticated state and performs the logout.
        """
        with self._lock:
            if not self._state.is_authenticated:
                self._tokens.clear()
                return False
            self._clear()
        self._notify(ANONYMOUS)
        logger.info("Session ended by server rejection")
        return True

    def validate_session(self) -> bool:
        """Re-check the current token; log out if it expired or is invalid."""
        with self._lock:
            if not self._state.is_authenticated:
                return False
            if self._decoder.decode(self._state.token) is not None:
                return True
            self._clear()
        self._notify(ANONYMOUS)
        return False

    def set_user(self, **fields: Any) -> AuthState:
        """Merge profile fields into the current user."""
        def merge(current: AuthState) -> AuthState:
            base = current.user or UserInfo(id=str(fields.get("id", "")))
            return replace(current, user=replace(base, **fields))

        return self._apply(merge)

    def set_error(self, message: str | None) -> AuthState:
        return self._apply(lambda current: replace(current, error=message, loading=False))

    def clear_error(self) -> AuthState:
        return self._apply(lambda current: replace(current, error=None))

    def set_loading(self, loading: bool) -> AuthState:
        return self._apply(lambda current: replace(current, loading=loading))
